"""
Function Discovery

Finds the array functions through the __function_meta__ dict each module
carries and runs the examples listed there.

Usage:
    from arrays.discovery import get_function, check_examples

    make_math = get_function("aggregates.make_math")
    make_math([1, 2, 3])  # Returns "6=1+2+3"

    check_examples()  # Returns [] when every example holds
"""

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from .safety.wrapper import safe_execute

logger = logging.getLogger(__name__)

BUILTIN_PACKAGES = ["arrays.transforms", "arrays.aggregates"]


@dataclass
class FunctionEntry:
    """A discovered function and the examples it documents."""

    name: str
    category: str
    func: Callable
    description: str = ""
    examples: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.category}.{self.name}"

    def __call__(self, *args, **kwargs):
        return self.func(*args, **kwargs)


@dataclass
class ExampleFailure:
    """An example whose actual output differs from the expected one."""

    full_name: str
    input: Any
    expected: Any
    actual: Any = None
    error: Optional[str] = None


def discover(package: str) -> List[FunctionEntry]:
    """
    Collect the functions of every module in a package that has
    a __function_meta__ dict.

    Args:
        package: Dotted package name, e.g. "arrays.transforms"

    Returns:
        Entries in module order
    """
    pkg = importlib.import_module(package)
    entries = []
    for module_info in pkgutil.iter_modules(pkg.__path__):
        module = importlib.import_module(f"{package}.{module_info.name}")
        meta = getattr(module, "__function_meta__", None)
        if not meta:
            continue
        entries.append(FunctionEntry(
            name=meta["name"],
            category=meta["category"],
            func=getattr(module, meta["name"]),
            description=meta.get("description", ""),
            examples=list(meta.get("examples", [])),
        ))
    logger.debug(f"Discovered {len(entries)} functions in {package}")
    return entries


_builtins: Optional[List[FunctionEntry]] = None


def builtin_functions(category: str = None) -> List[FunctionEntry]:
    """Functions shipped with the package, optionally of one category."""
    global _builtins
    if _builtins is None:
        _builtins = [entry for package in BUILTIN_PACKAGES for entry in discover(package)]
    if category:
        return [entry for entry in _builtins if entry.category == category]
    return list(_builtins)


def get_function(full_name: str) -> Optional[FunctionEntry]:
    """Look up a built-in function by "category.name", None if unknown."""
    for entry in builtin_functions():
        if entry.full_name == full_name:
            return entry
    return None


def check_examples(entries: Sequence[FunctionEntry] = None) -> List[ExampleFailure]:
    """
    Run documented examples and collect the ones that do not hold.

    Each example input is passed as the single argument of the function.
    A function that raises is reported with the error instead of a value.

    Args:
        entries: Functions to check, all built-ins by default

    Returns:
        List of failures, empty when every example passes
    """
    if entries is None:
        entries = builtin_functions()

    failures = []
    for entry in entries:
        for example in entry.examples:
            result = safe_execute(entry.func, example["input"])
            if not result.success:
                failures.append(ExampleFailure(
                    full_name=entry.full_name,
                    input=example["input"],
                    expected=example["output"],
                    error=f"{result.error_type}: {result.error}",
                ))
            elif result.value != example["output"]:
                failures.append(ExampleFailure(
                    full_name=entry.full_name,
                    input=example["input"],
                    expected=example["output"],
                    actual=result.value,
                ))

    if failures:
        logger.warning(f"{len(failures)} example(s) failed")
    return failures
