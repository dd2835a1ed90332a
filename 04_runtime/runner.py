"""
Runtime - The Command Line Shell
================================

This is THE SHELL - the entrypoint that wraps the entire system.

It provides:
- Argument parsing
- Configuration (YAML file + command line overrides)
- Console display and file storage of the table
- Self-checks with the table judge (examples and batch modes)

Run methods:
    python -m 04_runtime.runner --multiplicand 13597 --multiplier 8642
    python -m 04_runtime.runner --multiplicand 25 --multiplier 3 --output both --file table.txt
    python -m 04_runtime.runner --mode examples
    python -m 04_runtime.runner --mode batch --count 20 --digits 8
"""

import argparse
import random
import time
import sys
import importlib.util
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, List, Any
from uuid import uuid4

from .config import load_config, Config, OutputConfig, OUTPUT_MODES


EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ARGUMENTS = 2


# ============================================================================
# Dynamic Import Helper (for numbered modules)
# ============================================================================

def import_layer(layer_name: str):
    """Import a numbered layer dynamically, reusing it if already loaded."""
    if layer_name in sys.modules:
        return sys.modules[layer_name]

    project_root = Path(__file__).parent.parent
    folder_path = project_root / layer_name
    init_path = folder_path / "__init__.py"

    if not init_path.exists():
        raise ImportError(f"Layer {layer_name} not found")

    spec = importlib.util.spec_from_file_location(layer_name, init_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[layer_name] = module
    spec.loader.exec_module(module)
    return module


# ============================================================================
# Runtime Configuration
# ============================================================================

@dataclass
class RuntimeConfig:
    """Runtime configuration (how to run, not what to render)."""
    mode: str = "table"             # table, examples, batch
    config_path: Optional[str] = None
    verbose: bool = True

    # Command line overrides (None = keep the configuration file value)
    output: Optional[str] = None
    file: Optional[str] = None
    validate_product: Optional[bool] = None
    show_symbols: Optional[bool] = None
    show_author: Optional[bool] = None

    # Batch settings
    batch_count: int = 10
    batch_digits: int = 6
    seed: Optional[int] = None


# ============================================================================
# Session (one table)
# ============================================================================

@dataclass
class Session:
    """A single render request."""
    multiplicand: str
    multiplier: str
    session_id: str = field(default_factory=lambda: str(uuid4()))

    # Results
    content: str = ""
    judgments: List[Any] = field(default_factory=list)
    stored_at: Optional[str] = None

    # Timing
    start_time: Optional[float] = None
    end_time: Optional[float] = None

    def duration_ms(self) -> float:
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time) * 1000
        return 0.0


# ============================================================================
# Table Runtime
# ============================================================================

class TableRuntime:
    """
    Runs render requests.

    Loads the configuration once, then renders, displays,
    stores and judges as many sessions as needed.
    """

    def __init__(self, config: RuntimeConfig):
        self.runtime_config = config
        self.system_config: Optional[Config] = None
        self._initialized = False

        # Layers (lazy loaded)
        self._render = None
        self._judge = None

    def log(self, message: str) -> None:
        """Status line on stderr, so stdout only carries the table."""
        if self.runtime_config.verbose:
            print(message, file=sys.stderr)

    def initialize(self) -> None:
        """Initialize the runtime."""
        if self._initialized:
            return

        self.log("[Runtime] Initializing...")

        self.system_config = self._apply_overrides(load_config(self.runtime_config.config_path))

        self._render = import_layer("02_render")
        self.log("[Runtime] Renderer ready")

        evaluation_module = import_layer("03_evaluation")
        self._judge = evaluation_module.TableJudge()
        self.log("[Runtime] Judge ready")

        self._initialized = True
        self.log("[Runtime] Ready")

    def _apply_overrides(self, config: Config) -> Config:
        """Command line values win over the configuration file."""
        overrides = self.runtime_config

        if overrides.output is not None or overrides.file is not None:
            config.output = OutputConfig(
                mode=overrides.output or config.output.mode,
                file=overrides.file or config.output.file,
                encoding=config.output.encoding,
            )

        if overrides.validate_product is not None:
            config.table.validate_product = overrides.validate_product
        if overrides.show_symbols is not None:
            config.table.show_symbols = overrides.show_symbols
        if overrides.show_author is not None:
            config.table.show_author = overrides.show_author

        return config

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("Using the runtime failed because initialize() was not called")

    def render_options(self):
        """RenderOptions built from the table configuration."""
        self._require_initialized()
        table = self.system_config.table
        return self._render.RenderOptions(
            show_symbols=table.show_symbols,
            show_author=table.show_author,
            validate_product=table.validate_product,
        )

    def create_session(self, multiplicand: str, multiplier: str) -> Session:
        """Create a new render session."""
        return Session(multiplicand=str(multiplicand), multiplier=str(multiplier))

    def run_session(self, session: Session) -> Session:
        """Render the table of a session."""
        self._require_initialized()
        session.start_time = time.time()

        session.content = self._render.render_table(
            session.multiplicand,
            session.multiplier,
            self.render_options(),
        )

        session.end_time = time.time()
        self.log(
            f"[Runtime] Rendered {session.multiplicand} x {session.multiplier} "
            f"in {session.duration_ms():.2f}ms"
        )
        return session

    def judge_session(self, session: Session) -> bool:
        """Judge a rendered session. Returns True if every criterion passed."""
        self._require_initialized()
        session.judgments = self._judge.evaluate(
            session.content, session.multiplicand, session.multiplier,
        )
        return self._judge.all_passed(session.judgments)

    def summary(self, session: Session) -> str:
        """Judge summary of a judged session."""
        self._require_initialized()
        return self._judge.summary(session.judgments)

    def display(self, session: Session) -> None:
        """Print the table to the console."""
        print(session.content, end="")

    def store(self, session: Session, file_path: Optional[str] = None) -> Path:
        """
        Write the table to a file.

        Raises:
            RuntimeError: If the file cannot be written
        """
        self._require_initialized()
        output = self.system_config.output
        path = Path(file_path or output.file)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(session.content, encoding=output.encoding)
        except OSError as e:
            raise RuntimeError(f"Storing the table failed because {e}") from e

        session.stored_at = str(path)
        self.log(f"[Store] Table written to {path}")
        return path

    def deliver(self, session: Session) -> None:
        """Display and/or store, as configured."""
        self._require_initialized()
        output = self.system_config.output
        if output.displays:
            self.display(session)
        if output.stores:
            self.store(session)

    def shutdown(self) -> None:
        """Clean shutdown."""
        if self._initialized:
            self.log("[Runtime] Shutting down...")
        self._initialized = False


# ============================================================================
# CLI Entrypoints
# ============================================================================

def run_table(runtime: TableRuntime, multiplicand: str, multiplier: str) -> int:
    """Render one table and deliver it."""
    session = runtime.create_session(multiplicand, multiplier)
    runtime.run_session(session)
    runtime.deliver(session)
    return EXIT_OK


def run_examples(runtime: TableRuntime) -> int:
    """Render and judge every worked example."""
    evaluation_module = import_layer("03_evaluation")
    examples = evaluation_module.WORKED_EXAMPLES

    print("=" * 50)
    print(f"WORKED EXAMPLES ({len(examples)} tables)")
    print("=" * 50 + "\n")

    failures = 0
    for scenario in examples:
        inputs = scenario["inputs"]
        session = runtime.create_session(inputs["multiplicand"], inputs["multiplier"])
        runtime.run_session(session)
        passed = runtime.judge_session(session)

        expected = scenario["expected"].get("product")
        status = "✓" if passed else "✗"
        print(f"  {status} {scenario['name']}: {session.multiplicand} x {session.multiplier} = {expected}")
        if not passed:
            failures += 1
            print(runtime.summary(session))

    print("\n" + "=" * 50)
    print(f"Passed: {len(examples) - failures}/{len(examples)}")
    print("=" * 50)
    return EXIT_OK if failures == 0 else EXIT_FAILED


def run_batch(runtime: TableRuntime, count: int, digits: int, seed: Optional[int] = None) -> int:
    """Render and judge random multiplications."""
    if count < 1 or digits < 1:
        raise ValueError(
            f"Running the batch failed because count ({count}) and digits ({digits}) must be positive"
        )

    rng = random.Random(seed)

    print("=" * 50)
    print(f"BATCH MODE ({count} tables, up to {digits} digits)")
    print("=" * 50 + "\n")

    results = []
    for i in range(count):
        multiplicand = rng.randint(0, 10 ** digits - 1)
        multiplier = rng.randint(0, 10 ** digits - 1)

        session = runtime.create_session(str(multiplicand), str(multiplier))
        runtime.run_session(session)
        passed = runtime.judge_session(session)
        results.append((session, passed))

        status = "✓" if passed else "✗"
        print(f"  [{i+1}] {status} {multiplicand} x {multiplier} ({session.duration_ms():.2f}ms)")

    passed_count = sum(1 for _, passed in results if passed)
    avg_ms = sum(s.duration_ms() for s, _ in results) / len(results)

    print("\n" + "=" * 50)
    print("BATCH SUMMARY")
    print("=" * 50)
    print(f"Total: {count}")
    print(f"Success Rate: {100 * passed_count / count:.1f}%")
    print(f"Avg Render: {avg_ms:.2f}ms")
    print("=" * 50)
    return EXIT_OK if passed_count == count else EXIT_FAILED


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a table with the long-multiplication method given two values: "
                    "the multiplicand and the multiplier.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m 04_runtime.runner --multiplicand 13597 --multiplier 8642
  python -m 04_runtime.runner --multiplicand 25 --multiplier 3 --output store --file table.txt
  python -m 04_runtime.runner --mode examples          # Judge the worked examples
  python -m 04_runtime.runner --mode batch --count 20  # Judge random tables
"""
    )

    parser.add_argument("--mode", choices=["table", "examples", "batch"], default="table",
                        help="table=render one table, examples/batch=self-check with the judge")
    parser.add_argument("--multiplicand", type=str, help="The first coefficient of the multiplication")
    parser.add_argument("--multiplier", type=str, help="The second coefficient of the multiplication")
    parser.add_argument("--output", choices=list(OUTPUT_MODES), help="Display, store or both")
    parser.add_argument("--file", type=str, help="File path used when storing the table")
    parser.add_argument("--config", type=str, help="Config file path")
    parser.add_argument("--validate", action="store_true", default=None,
                        help="Add the product validation row (V)")
    parser.add_argument("--no-symbols", dest="show_symbols", action="store_false", default=None)
    parser.add_argument("--no-author", dest="show_author", action="store_false", default=None)
    parser.add_argument("--count", type=int, default=10, help="Batch count")
    parser.add_argument("--digits", type=int, default=6, help="Batch operand digits")
    parser.add_argument("--seed", type=int, help="Batch random seed")
    parser.add_argument("--quiet", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode == "table" and (args.multiplicand is None or args.multiplier is None):
        parser.error("--multiplicand and --multiplier are required in table mode")

    config = RuntimeConfig(
        mode=args.mode,
        config_path=args.config,
        verbose=not args.quiet,
        output=args.output,
        file=args.file,
        validate_product=args.validate,
        show_symbols=args.show_symbols,
        show_author=args.show_author,
        batch_count=args.count,
        batch_digits=args.digits,
        seed=args.seed,
    )

    runtime = TableRuntime(config)

    try:
        runtime.initialize()

        if args.mode == "table":
            return run_table(runtime, args.multiplicand, args.multiplier)
        elif args.mode == "examples":
            return run_examples(runtime)
        else:
            return run_batch(runtime, args.count, args.digits, args.seed)

    except ValueError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return EXIT_ARGUMENTS
    except RuntimeError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return EXIT_FAILED

    finally:
        runtime.shutdown()


if __name__ == "__main__":
    sys.exit(main())
