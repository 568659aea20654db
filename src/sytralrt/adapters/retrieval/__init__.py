"""Raw byte retrieval adapters."""

from sytralrt.adapters.retrieval.byte_retriever import UriByteRetriever

__all__ = ["UriByteRetriever"]
