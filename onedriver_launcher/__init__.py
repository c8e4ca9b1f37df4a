"""onedriver-launcher - manage onedriver mountpoints as systemd user units."""
