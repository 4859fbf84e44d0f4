#!/usr/bin/env python3
import os
import subprocess
import sys


def main():
    args = sys.argv[1:]
    env = dict(os.environ)
    if "--quick" in args:
        args.remove("--quick")
        env.setdefault("UNITDECODE_PROP_EXAMPLES", "25")
    try:
        res = subprocess.run(
            [sys.executable, "-m", "pytest", "-q", *args], capture_output=True, text=True, env=env
        )
    except FileNotFoundError:
        print("pytest not found. Run: pip install -e .[test]")
        return 1
    print(res.stdout)
    if res.returncode != 0:
        print(res.stderr)
    summary = ""
    for line in (res.stdout or "").splitlines():
        if line.strip().endswith("passed") or "failed" in line:
            summary = line.strip()
    print("\nSUMMARY:", summary)
    return res.returncode


if __name__ == "__main__":
    sys.exit(main())
