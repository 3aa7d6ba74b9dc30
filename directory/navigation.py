"""
Navigation bar: a static two-level menu and the mobile disclosure state.

Wide viewports reveal submenus on hover (pure CSS, no state). On narrow
viewports a toggle opens the menu, and at most one submenu is expanded at a
time.
"""

from dataclasses import dataclass, replace

BRAND = "Result.IO"


@dataclass(frozen=True)
class MenuItem:
    name: str
    href: str = "#"
    submenu: tuple["MenuItem", ...] = ()

    @property
    def has_submenu(self) -> bool:
        return bool(self.submenu)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "href": self.href,
            "submenu": [child.to_dict() for child in self.submenu],
        }


MENU_ITEMS: tuple[MenuItem, ...] = (
    MenuItem("Sales"),
    MenuItem("Products", submenu=(
        MenuItem("Electronics"),
        MenuItem("Clothing"),
        MenuItem("Books"),
    )),
    MenuItem("Services", submenu=(
        MenuItem("Consulting"),
        MenuItem("Design"),
        MenuItem("Development"),
    )),
    MenuItem("Contact"),
)


@dataclass(frozen=True)
class NavState:
    mobile_open: bool = False
    open_submenu: str | None = None

    def toggle_menu(self) -> "NavState":
        return replace(self, mobile_open=not self.mobile_open)

    def toggle_submenu(self, name: str) -> "NavState":
        """Open `name`, closing whichever was open; toggling it again closes it."""
        return replace(self, open_submenu=None if self.open_submenu == name else name)

    def is_open(self, item: MenuItem) -> bool:
        return item.has_submenu and self.open_submenu == item.name
