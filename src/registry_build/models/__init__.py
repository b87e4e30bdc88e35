"""Data models for registry-build.

Import from submodules:
- bundle: BundleItem, BundleMeta, BundleTable
"""
