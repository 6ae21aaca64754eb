from .store import FamilyStore, StoreStats, wl1_signature
from .families import MIN_FAMILY_SIZE, filter_families, classes_of_size, count_classes
from .generator import extend_graph, generate_graphs, generate_families

__all__ = [
    "FamilyStore",
    "StoreStats",
    "wl1_signature",
    "MIN_FAMILY_SIZE",
    "filter_families",
    "classes_of_size",
    "count_classes",
    "extend_graph",
    "generate_graphs",
    "generate_families",
]
