"""
Simple test runner script.
Run with: python run_tests.py

Uses pytest discovery to find all test files:
- Root level test files: test_*.py
- Tests directory: tests/test_*.py
"""

import subprocess
import sys

if __name__ == "__main__":
    result = subprocess.run(
        [
            sys.executable, "-m", "pytest",
            "-v",
            "--tb=short",
            "test_shuffler.py",
            "tests/",
        ],
        cwd=".",
    )
    sys.exit(result.returncode)
