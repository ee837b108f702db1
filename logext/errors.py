from __future__ import annotations


class StaticFacadeError(TypeError):
    def __init__(self, message: str, *, facade: str) -> None:
        super().__init__(message)
        self.facade = facade
