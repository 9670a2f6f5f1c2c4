"""Page composition: component clusters and the component composer."""

from irsite.composition.clusters import CAPITAL_MARKETS_HUB, ComponentClusters
from irsite.composition.composer import COMPONENT_SNIPPETS, ComponentComposer

__all__ = ["CAPITAL_MARKETS_HUB", "COMPONENT_SNIPPETS", "ComponentClusters", "ComponentComposer"]
