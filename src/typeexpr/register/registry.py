from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from caseconverter import pascalcase

from typeexpr.compiler import CompiledTest, Compiler, PredicateTest, ShapeTest, is_shape
from typeexpr.config import TypeOptions, TypeRegistryConfig
from typeexpr.evaluator import Evaluator
from typeexpr.register.defaults import BUILTIN_TESTS, CAPITALIZED, EXTRA_ALIASES
from typeexpr.register.errs import AliasTargetNotFoundError, TypeAssertionError, UnsupportedDefinitionError
from typeexpr.result import TestResult
from typeexpr.types import TypeTestFn
from typeexpr.utils.classes import class_to_test

logger = logging.getLogger(__name__)

TypeDefinition = str | type | Mapping[str, Any] | TypeTestFn


class TypeRegistry(Mapping[str, CompiledTest]):
    """
    Named type definitions plus the entry points for testing values against type expressions.

    A registry is meant to be configured once at startup. It does no locking: concurrent
    definitions or resets must be serialized by the caller.

    Examples:
        ```python
        registry = TypeRegistry("app")
        registry.define_type("Point", {"x": "number", "y": "number"})

        assert registry.test({"x": 1, "y": 2}, "Point")
        assert not registry.test({"x": 1, "y": "bad"}, "Point")
        registry.assert_type(["a", "b"], "string[]")
        ```
    """

    def __init__(self, name: str = "default", *, config: TypeRegistryConfig | None = None):
        self.name = name
        self.config = config or TypeRegistryConfig()

        self.__tests: dict[str, CompiledTest] = {}
        self.__options: dict[str, TypeOptions] = {}
        self.__defaults_defined = False
        self.__define_defaults_just_in_time = self.config.define_defaults_just_in_time

        self.evaluator = Evaluator(
            max_repr_depth=self.config.max_repr_depth,
            max_repr_length=self.config.max_repr_length,
        )
        self.compiler = Compiler(lookup=self.__tests.get, evaluator=self.evaluator)

    def __getitem__(self, key: str) -> CompiledTest:
        return self.__tests[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__tests)

    def __len__(self) -> int:
        return len(self.__tests)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, types={len(self)})"

    @property
    def defaults_defined(self) -> bool:
        """Whether the built-in types are currently registered."""
        return self.__defaults_defined

    @property
    def define_defaults_just_in_time(self) -> bool:
        """Whether first use registers the built-in types implicitly."""
        return self.__define_defaults_just_in_time

    def test(self, value: Any, type_expr: str) -> bool:  # noqa: ANN401
        """
        Test if a value matches a type expression.

        Raises:
            UnknownTypeError: If the type expression cannot be compiled.
        """
        return self.check(value, type_expr).value

    def check(self, value: Any, type_expr: str) -> TestResult:  # noqa: ANN401
        """
        Test a value and return the full result including nested failures.

        Raises:
            UnknownTypeError: If the type expression cannot be compiled.
        """
        compiled = self.compile(type_expr)
        return self.evaluator.evaluate(compiled, value, type_expr)

    def assert_type(self, value: Any, type_expr: str) -> None:  # noqa: ANN401
        """
        Assert a value to be of a type.

        Raises:
            TypeAssertionError: If the value does not match. It is a TypeError.
            UnknownTypeError: If the type expression cannot be compiled.
        """
        result = self.check(value, type_expr)
        if not result:
            fallback = f'Value "{self.evaluator.stringify(value)}" is not "{type_expr}"'
            raise TypeAssertionError(type_expr, result, fallback)

    def compile(self, type_expr: str) -> CompiledTest:
        """
        Compile a type expression against the types registered so far.
        """
        self._ensure_defaults()
        return self.compiler.compile(type_expr)

    def define_type(
        self,
        name: str,
        definition: TypeDefinition,
        options: TypeOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """
        Define a new type, or override an existing one.

        Args:
            name: Type name usable in type expressions.
            definition: A type expression, a class (instance check), a test function, or a mapping
                from property name to any of these.
            options: Options for the type. Plain mappings are validated into TypeOptions.

        Raises:
            UnsupportedDefinitionError: If the definition is of an unsupported kind.
            UnknownTypeError: If a type expression in the definition cannot be compiled.
            pydantic.ValidationError: If the options are invalid.
        """
        self._ensure_defaults()

        type_options = options if isinstance(options, TypeOptions) else TypeOptions.model_validate(options or {})
        compiled = self._compile_definition(name, definition)
        if is_shape(compiled):
            compiled = compiled.with_options(type_options, expr=name)

        self._define_type_test(name, compiled)
        self.__options[name] = type_options
        logger.debug("Defined type %r in registry %r", name, self.name)

    def define_alias(self, name: str, target: str) -> None:
        """
        Define `name` as another name for the registered type `target`.

        The alias follows later redefinitions of `target`.

        Raises:
            AliasTargetNotFoundError: If `target` is not registered.
        """
        self._ensure_defaults()
        self._define_alias(name, target)

    def get_type_options(self, name: str) -> TypeOptions:
        """
        Options the type was defined with. Defaults for types defined without options.
        """
        return self.__options.get(name, TypeOptions())

    def define_defaults(self) -> None:
        """
        Define the built-in types and their capitalised aliases. Does nothing once done.
        """
        if self.__defaults_defined:
            return

        for name, fn in BUILTIN_TESTS.items():
            self._define_type_test(name, PredicateTest(fn=fn, expr=name))
        for name in CAPITALIZED:
            self._define_alias(pascalcase(name), name)
        for alias, target in EXTRA_ALIASES.items():
            self._define_alias(alias, target)

        self.__defaults_defined = True
        logger.debug("Defined %d default types in registry %r", len(self), self.name)

    def set_define_defaults_just_in_time(self, enabled: bool) -> None:  # noqa: FBT001
        """
        Choose whether test(), assert_type() and define_type() call define_defaults() on first use.
        """
        self.__define_defaults_just_in_time = bool(enabled)

    def reset_initial_state(self) -> None:
        """
        Remove every type, built-in or defined, and forget that defaults were defined.

        This is useful for unit testing.
        """
        self.__tests.clear()
        self.__options.clear()
        self.__defaults_defined = False
        logger.debug("Reset registry %r", self.name)

    def _ensure_defaults(self) -> None:
        if self.__define_defaults_just_in_time and not self.__defaults_defined:
            self.define_defaults()

    def _define_type_test(self, name: str, test: CompiledTest) -> None:
        self.__tests[name] = test

    def _define_alias(self, name: str, target: str) -> None:
        if target not in self.__tests:
            raise AliasTargetNotFoundError(name, target)

        tests = self.__tests
        evaluator = self.evaluator

        def _alias(value: Any) -> TestResult:  # noqa: ANN401
            return evaluator.evaluate(tests[target], value, target)

        self._define_type_test(name, PredicateTest(fn=_alias, expr=name))

    def _compile_definition(self, name: str, definition: TypeDefinition) -> CompiledTest:
        if isinstance(definition, str):
            return self.compiler.compile(definition)
        if isinstance(definition, type):
            return PredicateTest(fn=class_to_test(definition), expr=name)
        if isinstance(definition, Mapping):
            return ShapeTest(
                properties={
                    str(key): self._compile_definition(f"{name}.{key}", value) for key, value in definition.items()
                },
                expr=name,
            )
        if callable(definition):
            return PredicateTest(fn=definition, expr=name)

        raise UnsupportedDefinitionError(name, definition)


DefaultTypeRegistry = TypeRegistry()
