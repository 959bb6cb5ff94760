"""Module which contains enumerated variables shared across the project."""

from enum import IntEnum

__all__ = ["DecayChannel", "enum_factory"]


class DecayChannel(IntEnum):
    """Enumerates the generator-level decay channels of a top quark pair."""

    E_NOTFOUND = 0
    E_HAD = 1
    E_EHAD = 2
    E_MUHAD = 3
    E_TAUHAD = 4
    E_EE = 5
    E_EMU = 6
    E_ETAU = 7
    E_MUMU = 8
    E_MUTAU = 9
    E_TAUTAU = 10
    E_OTHER = 11


def enum_factory(enum, value):
    """Parses an enumerated object from string name(s) to member(s).

    Parameters
    ----------
    enum : str
        Name of the enumerated type
    value : Union[str, int, List[Union[str, int]]]
        Name(s) or value(s) of the enumerated objects (from config)

    Returns
    -------
    Union[IntEnum, List[IntEnum]]
        Member or members of the enumerated type
    """
    enum_dict = {"decay_channel": DecayChannel}
    if enum not in enum_dict:
        raise ValueError(
            f"Enumerated type not recognized: {enum}. Must be one of "
            f"{list(enum_dict.keys())}."
        )
    enum = enum_dict[enum]

    if isinstance(value, (list, tuple)):
        return [enum_factory_single(enum, v) for v in value]

    return enum_factory_single(enum, value)


def enum_factory_single(enum, value):
    """Parses a single enumerated object.

    Accepts the member name with or without its `E_` prefix, case insensitive.
    """
    if not isinstance(value, str):
        return enum(value)

    name = value.upper()
    if not name.startswith("E_"):
        name = f"E_{name}"
    if not hasattr(enum, name):
        raise ValueError(
            f"Enumerated object not recognized: {value}. Must be one "
            f"of {[e.name for e in enum]}."
        )

    return getattr(enum, name)
