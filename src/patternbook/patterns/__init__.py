"""Design-pattern examples.

One module per pattern. Each module is self-contained: it defines the handful
of classes the pattern needs and a `demo()` function that runs the example
end to end and returns the lines the accompanying post prints. Modules never
import each other; the only shared piece is the `PatternError` base.
"""

from .errors import PatternError

__all__ = ["PatternError"]
