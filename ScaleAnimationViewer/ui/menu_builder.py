"""Menu and keyboard shortcut configuration for ImageViewer."""

from PySide6.QtGui import QAction
from PySide6.QtCore import Qt

# Zoom step for the +/- shortcuts
ZOOM_STEP = 1.25


def create_menus(viewer):
    """Create all menus and keyboard shortcuts for the viewer.

    Args:
        viewer: ImageViewer instance
    """
    menubar = viewer.menuBar()
    view = viewer.image_view

    # File menu
    file_menu = menubar.addMenu("File")
    file_menu.addAction(QAction("Open Images...", viewer, shortcut="Ctrl+O", triggered=viewer.open_files))
    file_menu.addSeparator()

    viewer.close_current_action = QAction("Close", viewer, shortcut="Ctrl+W")
    viewer.close_current_action.setShortcutContext(Qt.WindowShortcut)
    viewer.close_current_action.triggered.connect(viewer.close_current_image)
    viewer.addAction(viewer.close_current_action)
    file_menu.addAction(viewer.close_current_action)

    # Navigation
    viewer.next_image_action = QAction("Next Image", viewer, shortcut="n")
    viewer.next_image_action.setShortcutContext(Qt.WindowShortcut)
    viewer.next_image_action.triggered.connect(viewer.next_image)
    viewer.addAction(viewer.next_image_action)

    viewer.prev_image_action = QAction("Previous Image", viewer, shortcut="b")
    viewer.prev_image_action.setShortcutContext(Qt.WindowShortcut)
    viewer.prev_image_action.triggered.connect(viewer.prev_image)
    viewer.addAction(viewer.prev_image_action)

    # View menu
    view_menu = menubar.addMenu("View")

    viewer.zoom_in_action = QAction("Zoom In", viewer, shortcut="+")
    viewer.zoom_in_action.setShortcutContext(Qt.WindowShortcut)
    viewer.zoom_in_action.triggered.connect(lambda: view.zoom_at_center(ZOOM_STEP))
    viewer.addAction(viewer.zoom_in_action)

    viewer.zoom_out_action = QAction("Zoom Out", viewer, shortcut="-")
    viewer.zoom_out_action.setShortcutContext(Qt.WindowShortcut)
    viewer.zoom_out_action.triggered.connect(lambda: view.zoom_at_center(1.0 / ZOOM_STEP))
    viewer.addAction(viewer.zoom_out_action)

    viewer.fit_action = QAction("Fit to Window", viewer, shortcut="f")
    viewer.fit_action.setShortcutContext(Qt.WindowShortcut)
    viewer.fit_action.triggered.connect(view.fit_to_view)
    viewer.addAction(viewer.fit_action)

    viewer.toggle_zoom_action = QAction("Toggle Fit / Original Size", viewer, shortcut="Space")
    viewer.toggle_zoom_action.setShortcutContext(Qt.WindowShortcut)
    viewer.toggle_zoom_action.triggered.connect(view.toggle_fit_zoom)
    viewer.addAction(viewer.toggle_zoom_action)

    view_menu.addAction(viewer.zoom_in_action)
    view_menu.addAction(viewer.zoom_out_action)
    view_menu.addSeparator()
    view_menu.addAction(viewer.fit_action)
    view_menu.addAction(viewer.toggle_zoom_action)
    view_menu.addSeparator()
    view_menu.addAction(viewer.next_image_action)
    view_menu.addAction(viewer.prev_image_action)
