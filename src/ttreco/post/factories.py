"""Construct a discriminator module class from its name."""

from ttreco.utils.factory import instantiate, module_dict

from . import chi2, truth

# Build a dictionary of available discriminator modules
POST_DICT = {}
for module in [chi2, truth]:
    POST_DICT.update(**module_dict(module))


def post_processor_factory(name, cfg, ctx):
    """Instantiates a discriminator module from a configuration dictionary.

    Parameters
    ----------
    name : str
        Name of the discriminator module
    cfg : dict
        Discriminator module configuration
    ctx : Context
        Job-level field registry shared by all modules

    Returns
    -------
    DiscriminatorBase
         Initialized discriminator module
    """
    # Provide the name to the configuration, unless it is already specified
    cfg = dict(cfg)
    cfg.setdefault("name", name)

    return instantiate(POST_DICT, cfg, ctx)
