class TypeExprError(TypeError):
    """Base type expression exception."""

    ...


class UnknownTypeError(TypeExprError):
    """
    Raised when a type expression matches no construct and no registered type.
    """

    def __init__(self, type_expr: str):
        self.type_expr = type_expr
        super().__init__(f'Type definition for "{type_expr}" was unknown.')
