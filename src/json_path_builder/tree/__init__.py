"""Tree subpackage for the document node model.

Re-exports the public API for the tree module:
- Node: dataclass representing a node in the document tree
- NodeType: StrEnum of the four node kinds (OBJECT, ARRAY, SCALAR, NULL)
- TreeBuilder: converts Python JSON values into Node trees and back
"""

from json_path_builder.tree.builder import TreeBuilder
from json_path_builder.tree.nodes import Node, NodeType

__all__ = ["Node", "NodeType", "TreeBuilder"]
