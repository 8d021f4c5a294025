#!/usr/bin/env python3

# Run this app with this command:
#   $ bokeh serve --show ./viewer --args "trace_file"

from importlib.metadata import version, PackageNotFoundError

try:
    bokeh_version = version("bokeh")
except PackageNotFoundError:
    print("bokeh is not installed")
    exit(1)

if not bokeh_version.startswith("3."):
    print("Please install bokeh v3")
    exit(1)

import index_viewer

index_viewer.run()
