"""GTK 3 front-end. Imported only when the window is actually opened."""

import gi

gi.require_version("Gtk", "3.0")
