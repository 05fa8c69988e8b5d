# ==============================================
# INGEST
# ==============================================
#
# The input boundary: where the bytes come from and how they
# split into documents.
#
# Modules:
# --------
# - sources.py         → URL / file / stdin → raw bytes
# - document_reader.py → raw bytes → JSON object documents
#
# ==============================================

from .document_reader import DocumentReader
from .sources import read_source, USAGE

__all__ = ["DocumentReader", "read_source", "USAGE"]
