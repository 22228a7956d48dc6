from selectorkit.model.part import NO_RANK, Combinator, PartKind

__all__ = ["NO_RANK", "Combinator", "PartKind"]
