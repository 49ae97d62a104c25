#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import abc

from . import Attribute


class Reflector(abc.ABC):
    """Reflector that can name itself."""

    @abc.abstractmethod
    def getDebugName(self):
        """Get a name to use in debug and log messages.

        The name is unique against reflectors of any kind:
        - classes: the qualified class name
        - methods: "Class::method()"
        - parameters: "parameter $name of Class::method()"
        """

    @abc.abstractmethod
    def getFullName(self):
        """Get a name to use as identifier.

        Unique against other classes and methods:
        - classes: the qualified class name
        - methods: "Class::method"
        """


class AttributesMixin:
    """Attribute access for reflectors.

    Subclasses supply their own records through _attributeRecords(); the
    matching rules live in the Attribute module.
    """

    def _attributeRecords(self):
        raise NotImplementedError

    def getAttributes(self, name=None, flags=0):
        """Get attribute records.

        Args:
            name: Attribute class or qualified name, None for all
            flags: 0 for the exact class, IS_INSTANCEOF for subclasses too

        Returns:
            List of AttributeRecord
        """
        return Attribute.getAttributes(self._attributeRecords(), name, flags)

    def hasAttributes(self, name=None, flags=Attribute.IS_INSTANCEOF):
        """Return true if at least one matching attribute exists."""
        return len(self.getAttributes(name, flags)) > 0

    def getAttributeInstances(self, name, flags=Attribute.IS_INSTANCEOF):
        """Get instantiated attributes, skipping the record objects."""
        return [record.newInstance() for record in self.getAttributes(name, flags)]
