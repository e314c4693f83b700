"""OCCI model types consumed by the renderer, plus render options.

The renderer only reads these objects. Categories carry a closed variant tag
set at construction, so classification never inspects the class hierarchy.
"""

from dataclasses import dataclass, field
from typing import Any

from occi_render.domain.constants import ATTR_TARGET, ATTR_TITLE, HTTP_OK
from occi_render.domain.enums import CategoryVariant


@dataclass
class Attribute:
    """Attribute descriptor (metadata, not a value)."""

    mutable: bool = True
    required: bool = False
    type: str = 'string'
    range: str = ''
    default: Any = None


@dataclass
class Category:
    """An OCCI category: identity (term + scheme), title, attributes, location."""

    term: str
    scheme: str
    title: str = ''
    attributes: dict[str, Attribute] = field(default_factory=dict)
    location: str = ''
    variant: CategoryVariant = field(default=CategoryVariant.PLAIN, init=False)

    @property
    def type_identifier(self) -> str:
        return f"{self.scheme}{self.term}"


@dataclass
class Action:
    """An invokable operation: an action category plus optional parameters."""

    category: Category
    parameters: dict[str, Any] = field(default_factory=dict)

    @property
    def type_identifier(self) -> str:
        return self.category.type_identifier


@dataclass
class Kind(Category):
    """A category describing an entity's primary type."""

    related: 'Kind | None' = None
    actions: list[Action] = field(default_factory=list)
    variant: CategoryVariant = field(default=CategoryVariant.KIND, init=False)


@dataclass
class Mixin(Category):
    """A category tagging entities orthogonally to their kind."""

    related: list[Category] = field(default_factory=list)
    variant: CategoryVariant = field(default=CategoryVariant.MIXIN, init=False)


@dataclass(eq=False)
class Entity:
    """A model object with one kind, a set of mixins, and attribute values.

    Mixins are de-duplicated by type identifier on construction; the first
    occurrence wins and order is otherwise preserved.
    """

    id: str
    kind: Kind
    mixins: list[Mixin] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    actions: list[Action] = field(default_factory=list)
    location: str | None = None

    def __post_init__(self) -> None:
        seen: set[str] = set()
        unique: list[Mixin] = []
        for mixin in self.mixins:
            if mixin.type_identifier in seen:
                continue
            seen.add(mixin.type_identifier)
            unique.append(mixin)
        self.mixins = unique

    @property
    def type_identifier(self) -> str:
        return self.kind.type_identifier


@dataclass(eq=False)
class Link(Entity):
    """An entity associating a source resource with a target location."""

    @property
    def title(self) -> Any:
        return self.attributes.get(ATTR_TITLE)

    @property
    def target(self) -> Any:
        return self.attributes.get(ATTR_TARGET)


@dataclass(eq=False)
class Resource(Entity):
    """An entity owning links."""

    links: list[Link] = field(default_factory=list)


@dataclass
class RenderOptions:
    """Options controlling JSON emission."""

    pretty: bool = True
    ensure_ascii: bool = False
    success_status: int = HTTP_OK

    @property
    def indent(self) -> int | None:
        return 2 if self.pretty else None
