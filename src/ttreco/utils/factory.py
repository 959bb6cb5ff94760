"""Functions needed to instantiate a class from a configuration dictionary.

This allows to generically convert a YAML block into an instantiated
discriminator module, with checks that the class exists and that it is
provided with unambiguous arguments.
"""

from copy import deepcopy

from .logger import logger

__all__ = ["module_dict", "instantiate"]


def module_dict(module):
    """Converts a module into a dictionary which maps class names onto classes.

    Each class is registered under its Python name, under its `name` class
    attribute (if any) and under each of its `aliases`.

    Parameters
    ----------
    module : module
        Module from which to fetch the classes

    Returns
    -------
    dict
        Dictionary which maps acceptable class names to classes themselves
    """
    classes = {}
    cls_names = getattr(module, "__all__", dir(module))
    for cls_name in cls_names:
        # Skip private objects
        if cls_name[0] == "_":
            continue

        # Only consider classes which belong to the module of interest
        cls = getattr(module, cls_name)
        if not isinstance(cls, type) or cls.__module__ != module.__name__:
            continue

        classes[cls_name] = cls
        if getattr(cls, "name", None):
            classes[cls.name] = cls
        for alias in getattr(cls, "aliases", ()):
            classes[alias] = cls

    return classes


def instantiate(classes, cfg, *args, **kwargs):
    """Instantiates a class from a configuration dictionary.

    Supports the two following YAML configuration structures:

    .. code-block:: yaml

        module:
          name: class_name
          kwarg_1: value_1

    or

    .. code-block:: yaml

        module:
          name: class_name
          kwargs:
            kwarg_1: value_1

    Parameters
    ----------
    classes : dict
        Dictionary which maps a class name onto a class
    cfg : Union[str, dict]
        Configuration dictionary, or simply the name of the class
    *args : list
        Positional arguments to pass to the class constructor
    **kwargs : dict, optional
        Additional keyword arguments to pass to the class constructor

    Returns
    -------
    object
        Instantiated object
    """
    # A lone string is a class name with no parameters
    if isinstance(cfg, str):
        cfg = {"name": cfg}

    config = deepcopy(cfg)
    if "name" not in config:
        raise ValueError("Could not find the name of the class under `name`.")

    class_name = config.pop("name")
    if class_name not in classes:
        raise ValueError(
            f"Could not find '{class_name}' in the dictionary which maps "
            f"names to classes. Available names: {sorted(classes)}"
        )

    # Gather keyword arguments, refuse ambiguous duplicates
    kwargs = dict(config.pop("kwargs", {}), **kwargs)
    for key in config:
        if key in kwargs:
            raise ValueError(
                f"The keyword argument `{key}` is provided at the top level "
                "and under `kwargs`. Ambiguous."
            )
    kwargs.update(config)

    cls = classes[class_name]
    try:
        return cls(*args, **kwargs)

    except Exception:
        logger.error(
            "Failed to instantiate %s with these arguments:\n  - kwargs: %s",
            cls.__name__,
            kwargs,
        )
        raise
