"""Standards library indexer."""

from .models.standards import StandardsFile, StandardsHeader, StandardsNode, StandardsTree

__all__ = ["StandardsFile", "StandardsHeader", "StandardsNode", "StandardsTree"]
