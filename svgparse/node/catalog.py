"""Catalog of SVG element tags.

One table drives element construction instead of a class per tag:

    create("rect").set("width", 10)
    create("title", "Widgets")
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgparse.node.element import Element
from svgparse.node.text import Text

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class UnknownTagError(KeyError):
    """Raised for a tag name that is not in the catalog."""


@dataclass(frozen=True)
class ElementSpec:
    name: str
    # Accepts text content at construction
    content: bool = False
    # Children go on their own lines even when they are text
    bareable: bool = False
    defaults: dict[str, str] = field(default_factory=dict)


_PLAIN_TAGS = (
    "a",
    "animate",
    "animateColor",
    "animateMotion",
    "animateTransform",
    "circle",
    "clipPath",
    "defs",
    "desc",
    "ellipse",
    "filter",
    "feBlend",
    "feColorMatrix",
    "feComponentTransfer",
    "feComposite",
    "feConvolveMatrix",
    "feDiffuseLighting",
    "feDisplacementMap",
    "feDistantLight",
    "feDropShadow",
    "feFlood",
    "feFuncA",
    "feFuncB",
    "feFuncG",
    "feFuncR",
    "feGaussianBlur",
    "feImage",
    "feMerge",
    "feMergeNode",
    "feMorphology",
    "feOffset",
    "fePointLight",
    "feSpecularLighting",
    "feSpotLight",
    "feTile",
    "feTurbulence",
    "foreignObject",
    "g",
    "image",
    "line",
    "linearGradient",
    "link",
    "marker",
    "mask",
    "mpath",
    "path",
    "pattern",
    "polygon",
    "polyline",
    "radialGradient",
    "rect",
    "stop",
    "symbol",
    "use",
)

CATALOG: dict[str, ElementSpec] = {name: ElementSpec(name) for name in _PLAIN_TAGS}
CATALOG.update(
    {
        "svg": ElementSpec("svg", bareable=True, defaults={"xmlns": SVG_NAMESPACE}),
        "script": ElementSpec("script", content=True, bareable=True),
        "style": ElementSpec("style", content=True, bareable=True),
        "text": ElementSpec("text", content=True, bareable=True),
        "textPath": ElementSpec("textPath", content=True),
        "title": ElementSpec("title", content=True),
        "tspan": ElementSpec("tspan", content=True),
    }
)


def get_spec(name: str) -> ElementSpec:
    try:
        return CATALOG[name]
    except KeyError:
        raise UnknownTagError(name) from None


def create(name: str, content: str | None = None) -> Element:
    """Build an element for a catalog tag, applying its defaults."""
    spec = get_spec(name)
    element = Element(spec.name, bareable=spec.bareable)
    for attribute, value in spec.defaults.items():
        element.set(attribute, value)
    if content is not None:
        if not spec.content:
            raise ValueError(f"<{name}> does not take text content")
        element.add(Text(content))
    return element
