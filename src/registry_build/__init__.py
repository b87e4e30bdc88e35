"""registry-build: static shadcn registry artifacts from a source registry.

Import from submodules:
- version: __version__
- context: BuildContext, create_context
- operations: build_bundles, build_flat_registry, transform_output_tree
"""

from registry_build.version import __version__ as __version__
