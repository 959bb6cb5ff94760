"""Named accessors into an event record.

An event record is a dictionary of named data products, as provided by the
surrounding event loop. The accessors below fetch one product by name and
check its type, raising a fatal error if it is not there.
"""

from ttreco.errors import MissingProductError, ProductTypeError

from .hypothesis import HypothesisCollection, ReconstructionHypothesis
from .ttbargen import TTbarGen

__all__ = ["get_collection", "get_record"]


def get_collection(event, name):
    """Fetch a named hypothesis collection from an event.

    A plain list of hypotheses is accepted; it is converted to a
    :class:`HypothesisCollection` and stored back in the event so that the
    caller and the event share the same (mutable) object.

    Parameters
    ----------
    event : dict
        Dictionary of data products of one event
    name : str
        Name of the hypothesis collection

    Returns
    -------
    HypothesisCollection
        Mutable, ordered collection of hypotheses
    """
    if name not in event:
        raise MissingProductError(
            f"Hypothesis collection `{name}` is missing from the event. "
            f"Available products: {sorted(event)}"
        )

    hyps = event[name]
    if isinstance(hyps, HypothesisCollection):
        return hyps

    if not isinstance(hyps, list) or not all(
        isinstance(hyp, ReconstructionHypothesis) for hyp in hyps
    ):
        raise ProductTypeError(
            f"Event product `{name}` is not a list of reconstruction "
            f"hypotheses (got {type(hyps).__name__})."
        )

    event[name] = HypothesisCollection(hyps)

    return event[name]


def get_record(event, name, record_type=TTbarGen):
    """Fetch a named, read-only record from an event.

    Parameters
    ----------
    event : dict
        Dictionary of data products of one event
    name : str
        Name of the record
    record_type : type, default TTbarGen
        Expected type of the record

    Returns
    -------
    object
        Requested record
    """
    if name not in event:
        raise MissingProductError(
            f"Record `{name}` is missing from the event. "
            f"Available products: {sorted(event)}"
        )

    record = event[name]
    if not isinstance(record, record_type):
        raise ProductTypeError(
            f"Event product `{name}` is a {type(record).__name__}, "
            f"expected a {record_type.__name__}."
        )

    return record
