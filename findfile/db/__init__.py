"""Database module initialization"""
from .mongodb import MongoDB, get_db, get_documents_collection
from .document_store import DocumentStore

__all__ = ["MongoDB", "get_db", "get_documents_collection", "DocumentStore"]
