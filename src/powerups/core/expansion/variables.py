"""Variable scopes and placeholder substitution.

Syntax:
    ${name}              - Replaced with the bound value
    ${name.capitalized}  - Replaced with the value passed through a transform

Unbound names and unknown transforms are left verbatim so that later passes
(or other tools) can still resolve them.
"""
from __future__ import annotations

import re
from typing import Callable, Dict, List, Mapping, Optional

# Type for registered transforms
TransformType = Callable[[str], str]


class TransformRegistry:
    """Registry of named value transforms usable as ``${name.<transform>}``.

    Transforms can be registered using the @register decorator:

        registry = TransformRegistry()

        @registry.register("uppercased")
        def uppercased(value: str) -> str:
            return value.upper()
    """

    def __init__(self) -> None:
        self._transforms: Dict[str, TransformType] = {}

    def register(self, name: str) -> Callable[[TransformType], TransformType]:
        """Decorator to register a transform under ``name``."""
        def decorator(func: TransformType) -> TransformType:
            self._transforms[name] = func
            return func
        return decorator

    def get(self, name: str) -> Optional[TransformType]:
        return self._transforms.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._transforms

    def list_transforms(self) -> List[str]:
        return list(self._transforms.keys())


# Global registry for convenience
global_transforms = TransformRegistry()


def register_transform(name: str) -> Callable[[TransformType], TransformType]:
    """Register a transform in the global registry."""
    return global_transforms.register(name)


@register_transform("capitalized")
def capitalized(value: str) -> str:
    """Upper-case the first letter of every word, lower-case the rest.

    Words are runs of letters and digits; any other character separates them.

    >>> capitalized("hello wORLD")
    'Hello World'
    >>> capitalized("hello-world")
    'Hello-World'
    """
    return re.sub(r"[^\W_]+", lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), value)


def merge_scopes(base: Mapping[str, str], overlay: Mapping[str, str]) -> Dict[str, str]:
    """Merge two scopes; a key bound in both gets ``base[key] + overlay[key]``.

    Conflicting values are concatenated rather than replaced. Callers rely on
    this: an inherited binding and an inline binding of the same name combine.

    >>> merge_scopes({"a": "1", "b": "2"}, {"b": "3"})
    {'a': '1', 'b': '23'}
    """
    merged: Dict[str, str] = dict(base)
    for key, value in overlay.items():
        merged[key] = merged[key] + value if key in merged else value
    return merged


class VariableResolver:
    """Substitute scope bindings into text."""

    def __init__(self, transforms: Optional[TransformRegistry] = None) -> None:
        self.transforms = transforms or global_transforms

    def substitute(self, text: str, name: str, value: str) -> str:
        """Replace ``${name}`` and ``${name.<transform>}`` placeholders."""
        text = text.replace("${" + name + "}", value)

        pattern = re.compile(r"\$\{" + re.escape(name) + r"\.(\w+)\}")

        def replacer(match: re.Match[str]) -> str:
            func = self.transforms.get(match.group(1))
            if func is None:
                return match.group(0)
            return func(value)

        return pattern.sub(replacer, text)

    def apply(self, text: str, scope: Mapping[str, str]) -> str:
        """Substitute every binding of ``scope``, in scope order."""
        for name, value in scope.items():
            text = self.substitute(text, name, value)
        return text


_default_resolver = VariableResolver()


def substitute(text: str, name: str, value: str) -> str:
    return _default_resolver.substitute(text, name, value)


def apply_scope(text: str, scope: Mapping[str, str]) -> str:
    return _default_resolver.apply(text, scope)


__all__ = [
    "TransformRegistry",
    "global_transforms",
    "register_transform",
    "capitalized",
    "merge_scopes",
    "VariableResolver",
    "substitute",
    "apply_scope",
]
