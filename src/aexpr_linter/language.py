"""
After Effects expression language data.

Fixed allow-lists used by the tokenizer and the lint rules. They are bundled in
an immutable ``LanguageProfile`` so an engine can be given a different profile
(e.g. a newer host version) without touching module globals.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class DeprecatedFunction:
    replacement: str
    reason: str


KEYWORDS = (
    "var", "let", "const", "function", "if", "else", "for", "while", "do",
    "switch", "case", "default", "break", "continue", "return", "try",
    "catch", "finally", "throw", "new", "this", "true", "false", "null",
    "undefined",
)

# Global functions and objects available in every expression
AE_GLOBAL_FUNCTIONS = (
    "linear", "ease", "easeIn", "easeOut", "easeInOut", "clamp", "normalize",
    "smoothstep", "posterizeTime", "valueAtTime", "velocityAtTime",
    "speedAtTime", "timeToFrames", "framesToTime", "timeToTimecode",
    "timecodeToTime", "rgbToHsl", "hslToRgb", "hexToRgb", "rgbToHex",
    "degreesToRadians", "radiansToDegrees", "length", "lookAt", "cross",
    "dot", "createPath", "points", "inTangents", "outTangents", "isClosed",
    "wiggle", "loopIn", "loopOut", "loopInDuration", "loopOutDuration", "key",
    "nearestKey", "numKeys", "timeToNearestKey", "Math", "String", "Number",
    "Array", "Object", "Date", "thisComp", "thisLayer", "thisProperty",
    "time", "colorDepth", "downsampleFactor", "value", "index", "hasParent",
)

AE_LAYER_PROPERTIES = (
    "anchorPoint", "position", "scale", "rotation", "opacity", "transform",
    "effects", "layerStyles", "geometryOptions", "materialOptions", "audio",
    "marker", "time", "startTime", "outPoint", "inPoint", "stretch",
    "blendingMode", "threeDLayer", "shy", "solo", "locked", "hasVideo",
    "hasAudio", "active", "enabled", "selected", "motionBlur",
    "frameBlending", "quality", "samplingQuality", "width", "height", "index",
    "parent", "hasParent", "timeRemapEnabled", "source", "mask", "effect",
    "layerStyle", "content",
)

HOST_BUILTINS = ("time", "value", "index", "thisComp", "thisLayer", "thisProperty")

DEPRECATED_FUNCTIONS: Mapping[str, DeprecatedFunction] = MappingProxyType({
    "Math.round": DeprecatedFunction(
        "Math.round", "Use native Math.round instead of AE's version for better performance"
    ),
    "random": DeprecatedFunction("Math.random", "Use Math.random() for better randomization"),
    "seedRandom": DeprecatedFunction(
        "Math.seedrandom", "Use Math.seedrandom() for seeded random generation"
    ),
    "comp": DeprecatedFunction("thisComp", "Use thisComp for better readability and consistency"),
    "layer": DeprecatedFunction("thisLayer", "Use thisLayer for better readability and consistency"),
    "effect": DeprecatedFunction("thisLayer.effect", "Use full path for better clarity"),
})

EXPENSIVE_FUNCTIONS = ("wiggle", "random", "noise", "valueAtTime")

# "-1" can never match: the tokenizer emits unary minus as its own token
ALLOWED_NUMBERS = ("0", "1", "-1", "2", "10", "100", "360", "180", "90")

DECLARATION_KEYWORDS = ("var", "let", "const")
LOOP_KEYWORDS = ("for", "while")
COMPLEXITY_KEYWORDS = ("if", "else", "while", "for", "switch", "case", "catch")
LOGICAL_OPERATORS = ("&&", "||")

MULTI_CHAR_OPERATORS = ("==", "!=", "<=", ">=", "&&", "||", "++", "--", "+=", "-=", "*=", "/=")


@dataclass(frozen=True)
class LanguageProfile:
    """Immutable set of host names the tokenizer and rules classify against."""

    keywords: frozenset[str] = frozenset(KEYWORDS)
    global_functions: frozenset[str] = frozenset(AE_GLOBAL_FUNCTIONS)
    layer_properties: frozenset[str] = frozenset(AE_LAYER_PROPERTIES)
    builtins: tuple[str, ...] = HOST_BUILTINS
    deprecated_functions: Mapping[str, DeprecatedFunction] = field(
        default_factory=lambda: DEPRECATED_FUNCTIONS
    )
    expensive_functions: frozenset[str] = frozenset(EXPENSIVE_FUNCTIONS)
    allowed_numbers: frozenset[str] = frozenset(ALLOWED_NUMBERS)

    def with_builtins(self, extra: list[str] | tuple[str, ...]) -> "LanguageProfile":
        """Return a copy that also treats ``extra`` names as host built-ins."""
        merged = tuple(dict.fromkeys((*self.builtins, *extra)))
        return replace(self, builtins=merged)


DEFAULT_PROFILE = LanguageProfile()
