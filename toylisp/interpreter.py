from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from toylisp import LispValue
from toylisp.config import get_max_depth, get_prelude_path
from toylisp.errors import ToyResourceExhaustedError
from toylisp.reader.parser import read
from toylisp.expansion.expander import expand
from toylisp.evaluation.evaluator import evaluate
from toylisp.types.environment import Environment
from toylisp.builtin.env_builtin import PrimitiveRegistry, default_registry

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading, expanding and evaluating toylisp code.

    Primitives live in a root frame, and prelude definitions (if any) in a
    frame below it; programs never write to either. Every call to
    `eval`/`eval_all` runs its top-level forms in a fresh program frame, so
    one run cannot affect the next. Within a run, definitions made by earlier
    top-level forms are visible to later ones.
    """

    def __init__(
        self,
        registry: PrimitiveRegistry | None = None,
        max_depth: int | None = None,
        prelude: str | None = None,
    ):
        self.registry: PrimitiveRegistry = registry if registry is not None else default_registry()
        if max_depth is None:
            max_depth = get_max_depth()
        elif max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self.max_depth: int = max_depth
        if prelude is None:
            path = get_prelude_path()
            if path is not None:
                prelude = path.read_text(encoding="utf-8")
        self.prelude: str | None = prelude
        self._globals: Environment | None = None

    @property
    def globals(self) -> Environment:
        """Frame every program frame extends, built on first use."""
        if self._globals is None:
            env = self.registry.install(Environment())
            if self.prelude:
                env = env.extend()
                self._run(self.prelude, env)
            self._globals = env
        return self._globals

    def register_primitive(self, name: str, arity: int, fn: Callable[..., LispValue]) -> None:
        """Add (or replace) a host primitive; it is visible to every later run."""
        self.registry.register(name, arity, fn)
        self._globals = None

    def _run(self, code: str, env: Environment) -> list[LispValue]:
        try:
            forms = [expand(expr) for expr in read(code)]
        except RecursionError:
            raise ToyResourceExhaustedError("Source nests too deeply to read") from None
        results: list[LispValue] = []
        for form in forms:
            results.append(evaluate(form, env, 0, self.max_depth))
        return results

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`; return their values in order."""
        env = self.globals.extend()
        logger.debug("evaluating program (%d chars)", len(code))
        return self._run(code, env)

    def eval(self, code: str) -> LispValue:
        """Evaluate `code`; a single top-level form yields its value, several yield a list."""
        results = self.eval_all(code)
        if len(results) == 1:
            return results[0]
        return results

    def eval_file(self, path: str | Path) -> list[LispValue]:
        text = Path(path).read_text(encoding="utf-8")
        logger.debug("evaluating file %s", path)
        return self.eval_all(text)
