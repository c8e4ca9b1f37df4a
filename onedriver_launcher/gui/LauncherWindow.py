"""Main launcher window."""

import logging

from gi.repository import Gtk

from ..api.launcher.InteractionResult import InteractionResult
from ..api.launcher.Launcher import Launcher
from .MountRow import MountRow
from .open_mount import open_mount

logger = logging.getLogger(__name__)


class LauncherWindow(Gtk.ApplicationWindow):
    def __init__(self, application: Gtk.Application, launcher: Launcher):
        super().__init__(application=application)
        self.launcher = launcher
        self.rows: dict[str, MountRow] = {}
        self.set_default_size(550, 400)

        header = Gtk.HeaderBar()
        header.set_show_close_button(True)
        header.set_title("onedriver")
        self.set_titlebar(header)

        self.add_btn = Gtk.Button.new_from_icon_name("list-add-symbolic", Gtk.IconSize.BUTTON)
        self.add_btn.set_tooltip_text("New mountpoint")
        self.add_btn.connect("clicked", self.on_new_mountpoint_clicked)
        header.pack_start(self.add_btn)

        outer = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        self.add(outer)

        self.listbox = Gtk.ListBox()
        self.listbox.connect("row-activated", self.on_row_activated)
        outer.pack_start(self.listbox, True, True, 0)

        self.status_label = Gtk.Label(xalign=0)
        self.status_label.set_margin_start(8)
        self.status_label.set_margin_bottom(6)
        outer.pack_end(self.status_label, False, False, 0)

        for info in self.launcher.known_mounts():
            self._add_row(info)

    def _add_row(self, info) -> None:
        row = MountRow(self.launcher, info, on_removed=self._remove_row)
        self.rows[info.mountpoint] = row
        self.listbox.insert(row, -1)

    def _remove_row(self, row: MountRow) -> None:
        self.rows.pop(row.mountpoint, None)
        row.destroy()

    def on_new_mountpoint_clicked(self, _button: Gtk.Button) -> None:
        self.add_btn.set_sensitive(False)
        self.launcher.request_new_mountpoint(
            render=self.render_status,
            report_error=self.report_error,
            on_done=self.on_interaction_done,
        )

    def render_status(self, active_text: str, enabled_text: str) -> None:
        self.status_label.set_text(f"{active_text}, {enabled_text}")

    def report_error(self, message: str) -> None:
        self.status_label.set_text(message)
        dialog = Gtk.MessageDialog(
            transient_for=self,
            modal=True,
            message_type=Gtk.MessageType.ERROR,
            buttons=Gtk.ButtonsType.CLOSE,
            text=message,
        )
        dialog.run()
        dialog.destroy()

    def on_interaction_done(self, result: InteractionResult) -> None:
        self.add_btn.set_sensitive(True)
        if result.started and result.mountpoint and result.mountpoint not in self.rows:
            self._add_row(self.launcher.describe_result(result))

    def on_row_activated(self, _listbox: Gtk.ListBox, row: MountRow) -> None:
        logger.debug("Row activated for %s", row.mountpoint)
        if not row.active_switch.get_active():
            if not self.launcher.toggle_active(row.mountpoint, True):
                return
            row.set_active(True)
        open_mount(row.mountpoint)
