"""Contains the base class of all discriminator modules."""

from abc import ABC, abstractmethod

from ttreco.data.event import get_collection, get_record
from ttreco.errors import MissingProductError, UndeclaredFieldError
from ttreco.utils.logger import logger

__all__ = ["Context", "DiscriminatorBase"]


class Context:
    """Job-level registry of the discriminator fields written on collections.

    Each (collection, label) pair is interned to a small integer token the
    first time it is declared. Writing a field which was never declared is a
    configuration error.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._fields = {}

    def declare(self, collection, label):
        """Declare a discriminator label written on a hypothesis collection.

        Declaring the same field twice is allowed and returns the same token.

        Parameters
        ----------
        collection : str
            Name of the hypothesis collection
        label : str
            Discriminator label

        Returns
        -------
        int
            Token associated with the field
        """
        labels = self._fields.setdefault(collection, {})
        if label not in labels:
            labels[label] = len(labels)
            logger.debug("Declared field `%s` on `%s`.", label, collection)

        return labels[label]

    def check(self, collection, label):
        """Checks that a field was declared and returns its token.

        Parameters
        ----------
        collection : str
            Name of the hypothesis collection
        label : str
            Discriminator label

        Returns
        -------
        int
            Token associated with the field
        """
        try:
            return self._fields[collection][label]
        except KeyError:
            raise UndeclaredFieldError(collection, label) from None

    def fields(self, collection):
        """Tuple of labels declared on a collection, in declaration order."""
        return tuple(self._fields.get(collection, ()))


class DiscriminatorBase(ABC):
    """Base class of all discriminator modules.

    This base class performs the following functions:
      - Ensures that the necessary methods exist
      - Checks that the module is provided the data products it needs
      - Declares the discriminator fields the module writes, and refuses to
        write any other field

    A module is built once per job, then called once per event with the
    dictionary of data products of that event. It returns `True` if the event
    must keep being processed.

    Attributes
    ----------
    name : str
        Name of the module as defined in the configuration file
    aliases : Tuple[str]
        Alternative acceptable names for the module
    """

    # Name of the module (as specified in the configuration)
    name = None

    # Alternative allowed names of the module
    aliases = ()

    # Set of data keys needed for this module to operate
    _keys = ()

    def __init__(self, ctx, rechyps_name):
        """Initialize default discriminator module properties.

        Parameters
        ----------
        ctx : Context
            Job-level field registry
        rechyps_name : str
            Name of the hypothesis collection in the event
        """
        self.ctx = ctx
        self.rechyps_name = rechyps_name

        # The hypothesis collection is always needed
        self.update_keys({rechyps_name: True})

    @property
    def keys(self):
        """Dictionary of (key, necessity) pairs which determine which data keys
        are needed/optional for the module to run.

        Returns
        -------
        Dict[str, bool]
            Dictionary of (key, necessity) pairs to be used
        """
        return dict(self._keys)

    def update_keys(self, update_dict):
        """Update the underlying set of keys and their necessity in place.

        Parameters
        ----------
        update_dict : Dict[str, bool]
            Dictionary of (key, necessity) pairs to update the keys with
        """
        if len(update_dict) > 0:
            keys = self.keys
            keys.update(update_dict)
            self._keys = tuple(keys.items())

    def declare(self, *labels):
        """Declares the discriminator labels this module writes."""
        for label in labels:
            self.ctx.declare(self.rechyps_name, label)

    def __call__(self, event):
        """Calls the module on one event.

        Parameters
        ----------
        event : dict
            Dictionary of data products

        Returns
        -------
        bool
            `True` if the event must keep being processed
        """
        for key, req in self._keys:
            if req and key not in event:
                raise MissingProductError(
                    f"Module `{self.name}` is missing an essential input: "
                    f"`{key}`."
                )

        return bool(self.process(event))

    def get_hypotheses(self, event):
        """Fetches the hypothesis collection this module annotates."""
        return get_collection(event, self.rechyps_name)

    def get_truth(self, event, name):
        """Fetches a named generator-level truth record."""
        return get_record(event, name)

    def set_discriminator(self, hyp, label, value):
        """Writes one declared discriminator value on a hypothesis.

        Parameters
        ----------
        hyp : ReconstructionHypothesis
            Hypothesis to annotate
        label : str
            Discriminator label, which must have been declared
        value : float
            Score to write
        """
        self.ctx.check(self.rechyps_name, label)
        hyp.set_discriminator(label, value)

    def set_all(self, hyps, label, value):
        """Writes the same discriminator value on every hypothesis."""
        self.ctx.check(self.rechyps_name, label)
        for hyp in hyps:
            hyp.set_discriminator(label, value)

    @abstractmethod
    def process(self, event):
        """Place-holder method to be defined in each discriminator module.

        Parameters
        ----------
        event : dict
            Dictionary of data products of one event

        Returns
        -------
        bool
            `True` if the event must keep being processed
        """
        raise NotImplementedError("Must define the `process` function.")
