"""List row with the controls for one mountpoint."""

import logging
from collections.abc import Callable

from gi.repository import Gtk

from ..api.launcher.Launcher import Launcher
from ..api.launcher.MountInfo import MountInfo

logger = logging.getLogger(__name__)


class MountRow(Gtk.ListBoxRow):
    """Label, an active switch, an enabled toggle and a delete button."""

    def __init__(self, launcher: Launcher, info: MountInfo, on_removed: Callable[["MountRow"], None]):
        super().__init__()
        self.launcher = launcher
        self.mountpoint = info.mountpoint
        self._on_removed = on_removed
        self.set_selectable(True)

        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=5)
        self.add(box)

        label = Gtk.Label(label=info.label, xalign=0)
        box.pack_start(label, False, False, 5)

        delete_btn = Gtk.Button.new_from_icon_name("user-trash-symbolic", Gtk.IconSize.BUTTON)
        delete_btn.set_tooltip_text("Remove OneDrive account from local computer")
        delete_btn.connect("clicked", self.on_delete_clicked)
        box.pack_end(delete_btn, False, False, 0)

        self.enabled_btn = Gtk.ToggleButton()
        self.enabled_btn.set_image(Gtk.Image.new_from_icon_name("object-select-symbolic", Gtk.IconSize.BUTTON))
        self.enabled_btn.set_tooltip_text("Start mountpoint on login")
        box.pack_end(self.enabled_btn, False, False, 0)

        self.active_switch = Gtk.Switch()
        self.active_switch.set_tooltip_text("Mount or unmount selected OneDrive account")
        self.active_switch.set_valign(Gtk.Align.CENTER)
        box.pack_end(self.active_switch, False, False, 0)

        if info.status is not None:
            self.enabled_btn.set_active(info.status.enabled)
            self.active_switch.set_active(info.status.active)
        self.enabled_btn.connect("toggled", self.on_enabled_toggled)
        self.active_switch.connect("state-set", self.on_active_state_set)

        self.show_all()

    def on_enabled_toggled(self, button: Gtk.ToggleButton) -> None:
        self.launcher.toggle_enabled(self.mountpoint, button.get_active())

    def on_active_state_set(self, switch: Gtk.Switch, state: bool) -> bool:
        if not self.launcher.toggle_active(self.mountpoint, state):
            return True  # keep the switch where it was
        return False

    def set_active(self, active: bool) -> None:
        self.active_switch.set_active(active)

    def on_delete_clicked(self, _button: Gtk.Button) -> None:
        dialog = Gtk.Dialog(title="Remove mountpoint?", transient_for=self.get_toplevel(), modal=True)
        dialog.add_buttons("Cancel", Gtk.ResponseType.REJECT, "Remove", Gtk.ResponseType.ACCEPT)
        try:
            if dialog.run() == Gtk.ResponseType.ACCEPT:
                self.launcher.remove_mount(self.mountpoint)
                self._on_removed(self)
        finally:
            dialog.destroy()
