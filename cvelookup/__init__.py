"""cvelookup — Look up a single CVE record from the NVD web API.

This package provides the pipeline for normalizing a CVE identifier,
fetching its record, and rendering the key fields as a terminal table.
"""

__version__ = "0.1.0"
