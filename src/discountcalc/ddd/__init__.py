from discountcalc.ddd.queries import Query

__all__ = ["Query"]
