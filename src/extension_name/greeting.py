"""
extension_name.greeting

Greeting capability shared by the internal and the public controllers.
"""

from __future__ import annotations


class GreetingProvider:
    def __init__(self, text: str) -> None:
        self._text = text

    def hello(self) -> str:
        return self._text
