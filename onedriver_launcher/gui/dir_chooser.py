"""Directory selection dialog."""

from gi.repository import Gtk


def dir_chooser(title: str, parent: Gtk.Window | None = None) -> str | None:
    """Ask for a directory; returns its path, or None if the user cancelled."""
    dialog = Gtk.FileChooserDialog(
        title=title,
        transient_for=parent,
        action=Gtk.FileChooserAction.SELECT_FOLDER,
    )
    dialog.add_buttons(
        "_Cancel", Gtk.ResponseType.CANCEL,
        "_Select", Gtk.ResponseType.ACCEPT,
    )
    dialog.set_create_folders(True)
    try:
        if dialog.run() != Gtk.ResponseType.ACCEPT:
            return None
        return dialog.get_filename()
    finally:
        dialog.destroy()
