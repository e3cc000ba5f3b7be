"""Composite pattern: a navigation menu tree.

Leaves (`MenuItem`) and branches (`Menu`) share one interface, so client code
renders or counts a whole tree without caring which kind of node it holds.
"""

from __future__ import annotations

import abc

INDENT = "  "


class MenuComponent(abc.ABC):
    """Common interface for menu leaves and menu branches."""

    def __init__(self, title: str) -> None:
        self.title = title

    @abc.abstractmethod
    def render(self, depth: int = 0) -> list[str]:
        """Render this node (and any children) as indented lines."""

    @abc.abstractmethod
    def count(self) -> int:
        """Number of leaf items reachable from this node."""


class MenuItem(MenuComponent):
    """A leaf: a single link."""

    def __init__(self, title: str, url: str) -> None:
        super().__init__(title)
        self.url = url

    def render(self, depth: int = 0) -> list[str]:
        return [f"{INDENT * depth}- {self.title} ({self.url})"]

    def count(self) -> int:
        return 1


class Menu(MenuComponent):
    """A branch holding any mix of items and sub-menus."""

    def __init__(self, title: str) -> None:
        super().__init__(title)
        self._children: list[MenuComponent] = []

    @property
    def children(self) -> tuple[MenuComponent, ...]:
        return tuple(self._children)

    def add(self, *components: MenuComponent) -> Menu:
        """Append children and return self so calls can be chained.

        Raises:
            ValueError: If a component is this menu or one of its ancestors.
        """
        for component in components:
            if component is self or (
                isinstance(component, Menu) and component.contains(self)
            ):
                raise ValueError(f"Cannot add menu '{self.title}' inside itself.")
            self._children.append(component)
        return self

    def remove(self, component: MenuComponent) -> None:
        self._children.remove(component)

    def contains(self, component: MenuComponent) -> bool:
        """True if `component` appears anywhere below this menu."""
        for child in self._children:
            if child is component:
                return True
            if isinstance(child, Menu) and child.contains(component):
                return True
        return False

    def render(self, depth: int = 0) -> list[str]:
        lines = [f"{INDENT * depth}+ {self.title}"]
        for child in self._children:
            lines.extend(child.render(depth + 1))
        return lines

    def count(self) -> int:
        return sum(child.count() for child in self._children)


def demo() -> list[str]:
    """Build a site menu and render it."""
    main = Menu("Main")
    blog = Menu("Blog").add(
        MenuItem("Design patterns", "/blog/patterns"),
        MenuItem("Framework tips", "/blog/framework"),
    )
    main.add(MenuItem("Home", "/"), blog, MenuItem("About", "/about"))
    return [*main.render(), f"{main.count()} links"]
