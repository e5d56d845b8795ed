"""PkgSift — Search public package registries from one command line.

Supported sources: crates.io, npms.io, jsDelivr (Algolia), Docker Hub and
Packagist.
"""

__version__ = "0.1.0"
