"""Build operations for registry-build.

Import from submodules:
- bundles: build_bundles
- flat: build_flat_registry
- transform_deps: transform_output_tree
"""
