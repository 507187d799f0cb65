from enum import Enum


class TargetKind(str, Enum):
    """Defines the kind of target passed to the injector.

    Attributes:
        CLASS: A class or a string identifier naming one.
        OBJECT: A live object whose method is invoked.
        CALLABLE: A function or any other callable invoked directly.
    """

    CLASS = "class"
    OBJECT = "object"
    CALLABLE = "callable"

    def __str__(self) -> str:
        return self.value


class ParameterKind(str, Enum):
    """Defines how a single signature parameter gets its value.

    Attributes:
        PRIMITIVE: Value comes from a default or an explicit override.
        DEPENDENCY: Value is built by resolving the annotated class.
    """

    PRIMITIVE = "primitive"
    DEPENDENCY = "dependency"

    def __str__(self) -> str:
        return self.value
