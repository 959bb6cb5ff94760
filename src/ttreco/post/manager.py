"""Manages the operation of discriminator modules."""

from collections import OrderedDict
from copy import deepcopy

import numpy as np

from ttreco.utils.logger import logger

from .base import Context
from .factories import post_processor_factory

__all__ = ["DiscriminatorManager"]


class DiscriminatorManager:
    """Manager in charge of running a chain of discriminator modules.

    It loads all the modules once and feeds them events. The modules are run
    in configuration order, unless a `priority` is specified in their
    configuration block (higher priority runs first).

    .. code-block:: yaml

        post:
          chi2:
            rechyps_name: TTbarReconstruction
          correct_match:
            rechyps_name: TTbarReconstruction
            priority: 1
    """

    def __init__(self, cfg, ctx=None):
        """Initialize the discriminator manager.

        Parameters
        ----------
        cfg : dict
            Discriminator module configurations, keyed by module name
        ctx : Context, optional
            Job-level field registry. A new one is created if not provided.
        """
        self.ctx = ctx if ctx is not None else Context()

        # Loop over the modules and get their priorities
        cfg = deepcopy(cfg)
        keys = list(cfg.keys())
        priorities = np.zeros(len(keys), dtype=np.int32)
        for i, key in enumerate(keys):
            if cfg[key] is None:
                cfg[key] = {}
            if "priority" in cfg[key]:
                priorities[i] = cfg[key].pop("priority")

        # Add the modules in decreasing order of priority (stable for ties)
        self.modules = OrderedDict()
        for i in np.argsort(-priorities, kind="stable"):
            key = keys[i]
            self.modules[key] = post_processor_factory(key, cfg[key], self.ctx)
            logger.info("Loaded discriminator module `%s`.", key)

    def __len__(self):
        """Number of modules in the chain."""
        return len(self.modules)

    def __call__(self, event):
        """Pass one event through the discriminator modules.

        Parameters
        ----------
        event : dict
            Dictionary of data products, annotated in place

        Returns
        -------
        bool
            `True` if every module requested to keep processing the event
        """
        for key, module in self.modules.items():
            if not module(event):
                logger.debug("Module `%s` stopped the processing of the event.", key)
                return False

        return True
