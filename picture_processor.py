#!/usr/bin/env python3
from picfilter.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
