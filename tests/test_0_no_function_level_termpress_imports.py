"""Guard: no function-level `import termpress` inside src/.

A function-level `import termpress.x.y` shadows the module-level `termpress`
binding for the ENTIRE enclosing function, causing UnboundLocalError on
any `termpress.` reference that precedes the import statement.

This file is named with `test_0_` so it runs first.
"""

import ast
import os


_SRC_ROOT = os.path.join(os.path.dirname(__file__), "..", "src", "termpress")


def _find_function_level_termpress_imports():
    """Walk all .py files and flag `import termpress.*` inside functions/methods."""
    violations = []
    for dirpath, _dirs, files in os.walk(_SRC_ROOT):
        for fname in files:
            if not fname.endswith(".py"):
                continue
            path = os.path.join(dirpath, fname)
            with open(path) as f:
                tree = ast.parse(f.read(), filename=path)

            rel = os.path.relpath(path, _SRC_ROOT)
            for node in ast.walk(tree):
                if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                    continue
                for child in ast.walk(node):
                    if isinstance(child, ast.Import):
                        names = [alias.name for alias in child.names]
                    elif isinstance(child, ast.ImportFrom):
                        names = [child.module or ""]
                    else:
                        continue
                    for name in names:
                        if name.startswith("termpress"):
                            violations.append(f"{rel}:{child.lineno} function-level import of {name}")
    return violations


def test_no_function_level_termpress_imports():
    violations = _find_function_level_termpress_imports()
    assert violations == [], (
        "Function-level termpress imports shadow the module binding and "
        "hide import cycles. Move these to module level:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
