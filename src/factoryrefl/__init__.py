#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# factoryrefl - classes and methods as factory descriptors

# Base types
from .Obj import Obj

# Errors
from .Err import Err, ArgErr, ReflectionErr, UnknownTypeErr, UnknownSlotErr, UnknownParamErr, UnreachableErr

# Native reflection
from .Type import Type
from .Slot import Slot, FConst
from .Method import Method
from .Field import Field
from .Param import Param
from .TypeRef import SelfRef

# Attributes
from .Attribute import attribute, AttributeRecord, IS_INSTANCEOF

# Factory descriptors
from .Reflector import Reflector, AttributesMixin
from .Factory import Factory
from .ClassReflection import ClassReflection
from .MethodReflection import MethodReflection
from .ParameterReflection import ParameterReflection
from .FactoryReflection import FactoryReflection
