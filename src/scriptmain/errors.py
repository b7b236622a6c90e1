## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class ScriptError(Exception):
    def __init__(self, message: str = "", *, text=None):
        """Base class for all errors raised while preparing a script's options."""
        super().__init__(message)
        self.text: str = text

class IndicatorParseError(ScriptError, ValueError):
    def __init__(self, text: str):
        super().__init__(f'Invalid predicate indicator: "{text}"', text=text)

class TopicParseError(ScriptError, ValueError):
    def __init__(self, text: str, *, column=None):
        super().__init__(f'Invalid debug topic: "{text}"', text=text)
        self.column = column

class DirectiveValueError(ScriptError, TypeError):
    """Directive option given a value of the wrong type, e.g. a bare `--spy`."""
    def __init__(self, name: str, value):
        super().__init__(f"Option `--{name}` expects a value, e.g. `--{name}=...`, got `{value!r}`.", text=name)
        self.value = value

class SpyTargetError(ScriptError, LookupError):
    pass
