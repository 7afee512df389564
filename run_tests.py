#!/usr/bin/env python3
"""
Main test runner for the Lox scanner tests.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Scan a small program end to end before running the unit tests."""

    print("Lox Scanner Test Suite")
    print("=" * 60)

    try:
        from lox.lexer import scan
    except ImportError as e:
        print(f"Failed to import scanner: {e}")
        return False

    code = """
    fun add(a, b) {
        return a + b; // sum
    }
    print add(1, 2.5);
    """

    print("Scanning sample program...")
    result = scan(code)
    print(f"  Generated {len(result.tokens)} tokens")
    if result.had_error:
        for diagnostic in result.diagnostics:
            print(f"  {diagnostic}")
        return False
    print()
    return True


def run_all_tests():
    """Run the smoke test and every tests/test_*.py module."""
    if not run_smoke_test():
        return False

    suite = unittest.defaultTestLoader.discover(
        os.path.join(project_root, "tests"), top_level_dir=project_root
    )
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print()
    print("=" * 60)
    print(f"Ran {result.testsRun} tests: "
          f"{len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
