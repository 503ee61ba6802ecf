"""Plugin registry used to look up pdf2pngx tools by name."""

from __future__ import annotations

from typing import Dict, Iterable

from .interfaces import BaseTool, ConversionContext, ToolFactory


class ToolRegistry:
    """Maps tool names to :class:`BaseTool` subclasses."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if not (isinstance(tool_class, type) and issubclass(tool_class, BaseTool)):
            raise TypeError(f"Tool '{name}' must be a BaseTool subclass")
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, context: ConversionContext) -> BaseTool:
        tool_class = self._tools.get(name)
        if tool_class is None:
            available = ", ".join(self.names()) or "<none>"
            raise KeyError(f"Tool '{name}' is not registered (available: {available})")
        return tool_class(context)

    def names(self) -> Iterable[str]:
        return sorted(self._tools)


registry = ToolRegistry()


def register_tool(name: str):
    """Class decorator adding the decorated tool to :data:`registry`."""

    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool", "ConversionContext", "BaseTool", "ToolFactory"]
