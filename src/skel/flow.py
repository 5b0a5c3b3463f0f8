from abc import ABC


class CohomologicalFlow(ABC):
    """
    Marker base class for flow fields defined on simplicial complexes, e.g., flows
    on chains/cochains or flow matching conditioned on persistent homology
    features.

    No operations are defined yet.
    """
