"""GRIFFEL_bim_data: BIM properties attached to nodes.

The extension appears on two owners under the same name:

* the document root holds the string tables (``propertyNames``,
  ``propertyValues``), the ``properties`` pairs indexing them, reusable
  ``types`` and optional per-node mappings;
* a node holds indices into those tables, or a buffer view with the same
  information in binary form.

Property strings are deduplicated, so a node property is two hops away from
its text: ``node.properties[i] -> root.properties[j] -> (name, value)``.
"""

from __future__ import annotations

from typing import ClassVar

from gltfext.codec import box
from gltfext.extensions.base import ExtensionModel, JsonModel, UInt32
from gltfext.registry import ParentKind

EXTENSION_NAME = "GRIFFEL_bim_data"


class BimProperty(JsonModel):
    """A property as a pair of indices into the root string tables."""

    name: UInt32
    value: UInt32


class BimType(JsonModel):
    """Property set shared by every node of one type."""

    properties: list[UInt32]


class NodePropertyMapping(JsonModel):
    """Properties and type assigned to a node from the document root."""

    node: UInt32
    properties: list[UInt32]
    type: UInt32 | None = None


class BimData(ExtensionModel):
    """Node-level payload."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.NODE

    properties: list[UInt32] | None = None
    type: UInt32 | None = None
    buffer_view: UInt32 | None = None

    def set_property_indices(self, indices: list[int]) -> None:
        self._assign("properties", list(box(indices)))

    def set_type_index(self, index: int) -> None:
        self._assign("type", box(index))

    def set_buffer_view_index(self, index: int) -> None:
        self._assign("buffer_view", box(index))

    def get_property_indices(self) -> list[int] | None:
        return self.properties

    def get_type_index(self) -> int | None:
        return self.type

    def get_buffer_view_index(self) -> int | None:
        return self.buffer_view


class BimDataRoot(ExtensionModel):
    """Document-level payload: the shared string and property tables."""

    extension_name: ClassVar[str] = EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.DOCUMENT

    property_names: list[str]
    property_values: list[str]
    properties: list[BimProperty]
    types: list[BimType]
    node_properties: list[NodePropertyMapping] | None = None

    # -- builder helpers ------------------------------------------------------

    @classmethod
    def empty(cls) -> BimDataRoot:
        """Return a root payload with empty tables, ready to be filled."""
        return cls(property_names=[], property_values=[], properties=[], types=[])

    def add_property_name(self, name: str) -> int:
        """Append a property name and return its index."""
        self.property_names.append(name)
        return len(self.property_names) - 1

    def add_property_value(self, value: str) -> int:
        """Append a property value and return its index."""
        self.property_values.append(value)
        return len(self.property_values) - 1

    def add_property(self, name_index: int, value_index: int) -> int:
        """Append a ``(name, value)`` index pair and return its index."""
        self.properties.append(BimProperty(name=name_index, value=value_index))
        return len(self.properties) - 1

    def add_type(self, property_indices: list[int]) -> int:
        self.types.append(BimType(properties=list(property_indices)))
        return len(self.types) - 1

    def add_node_property_mapping(
        self,
        node_index: int,
        property_indices: list[int],
        type_index: int | None = None,
    ) -> None:
        mapping = NodePropertyMapping(
            node=node_index,
            properties=list(property_indices),
            type=type_index,
        )
        if self.node_properties is None:
            self._assign("node_properties", [mapping])
        else:
            self.node_properties.append(mapping)

    # -- resolution -----------------------------------------------------------

    def property_pair(self, index: int) -> tuple[str, str]:
        """Resolve property *index* to its ``(name, value)`` strings."""
        prop = self.properties[index]
        return self.property_names[prop.name], self.property_values[prop.value]

    def property_pairs(self) -> list[tuple[str, str]]:
        """Resolve every entry of ``properties``, in table order."""
        return [self.property_pair(i) for i in range(len(self.properties))]

    def properties_for(self, node: BimData) -> dict[str, str]:
        """Return the resolved properties of *node*, type properties first.

        Properties set directly on the node override those of its type.
        """
        indices: list[int] = []
        if node.type is not None:
            indices.extend(self.types[node.type].properties)
        indices.extend(node.properties or [])
        return dict(self.property_pair(i) for i in indices)
