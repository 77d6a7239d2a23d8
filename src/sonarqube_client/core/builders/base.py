"""Fluent request builder."""

from abc import ABC
from collections.abc import Awaitable, Callable
from typing import Any, Generic, Self, TypeVar

ResponseT = TypeVar("ResponseT")

Executor = Callable[[dict[str, Any]], Awaitable[ResponseT]]


class BaseBuilder(ABC, Generic[ResponseT]):
    """Accumulates request parameters and executes the request.

    Setters store values under the parameter's wire name and return the
    builder so calls can be chained. Setting a key again replaces the
    previous value.
    """

    def __init__(self, executor: Executor[ResponseT]) -> None:
        """Initialize the builder.

        Args:
            executor: Coroutine function performing the request
        """
        self._executor = executor
        self._params: dict[str, Any] = {}

    def set_param(self, key: str, value: Any) -> Self:
        self._params[key] = value
        return self

    def set_params(self, **params: Any) -> Self:
        self._params.update(params)
        return self

    @property
    def params(self) -> dict[str, Any]:
        """Copy of the accumulated parameters."""
        return dict(self._params)

    def validate(self) -> None:
        """Check parameter constraints before a request is sent.

        Raises:
            SonarQubeValidationError: A constraint is violated
        """

    async def execute(self) -> ResponseT:
        """Validate the parameters and run the request.

        Returns:
            Whatever the executor returns

        Raises:
            SonarQubeValidationError: Invalid parameters, no request is sent
            SonarQubeError: The request failed
        """
        self.validate()
        return await self._executor(self.params)
