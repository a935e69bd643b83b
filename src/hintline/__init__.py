"""hintline: live command-line buffer with grammar-driven argument hints."""

# Input buffer and editing
from hintline.buffer import Cursor, InputBuffer, Side
from hintline.editor import LineEditor

# Classification
from hintline.classifier import ArgumentClassifier, TokenMatch, TokenRole, classify_tokens

# Command grammars
from hintline.grammar import (
    DEFAULT_GRAMMARS,
    ArgKind,
    CommandGrammar,
    Flag,
    FlagArgPair,
    SingleArg,
    grammars_from_config,
)

# Hints and providers
from hintline.executables import ExecutableIndex, make_executables_hint, update_executables_hint
from hintline.filesystem import (
    PathTarget,
    list_directory,
    make_directory_hint,
    resolve_arg_path,
    update_directory_hint,
)
from hintline.hints import Hint

# Execution hand-off
from hintline.invocation import Invocation, build_invocation, expand_hook

# Settings and shared state
from hintline.settings import ShellSettings, load_settings, save_settings
from hintline.state import ShellContext

__all__ = [
    # Buffer
    "Cursor",
    "InputBuffer",
    "LineEditor",
    "Side",
    # Classification
    "ArgumentClassifier",
    "TokenMatch",
    "TokenRole",
    "classify_tokens",
    # Grammars
    "ArgKind",
    "CommandGrammar",
    "DEFAULT_GRAMMARS",
    "Flag",
    "FlagArgPair",
    "SingleArg",
    "grammars_from_config",
    # Hints
    "ExecutableIndex",
    "Hint",
    "PathTarget",
    "list_directory",
    "make_directory_hint",
    "make_executables_hint",
    "resolve_arg_path",
    "update_directory_hint",
    "update_executables_hint",
    # Execution
    "Invocation",
    "build_invocation",
    "expand_hook",
    # Settings
    "ShellContext",
    "ShellSettings",
    "load_settings",
    "save_settings",
]
