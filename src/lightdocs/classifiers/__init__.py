"""Document classification rules."""

from lightdocs.classifiers.document_classifier import (
    FALLBACK_SECTION,
    REFERENCE_FOLDER,
    classify,
    classify_documents,
    derive_section,
    derive_title,
    extract_keywords,
    extract_method_name,
    is_comprehensive_doc,
    is_rpc_method,
)

__all__ = [
    "FALLBACK_SECTION",
    "REFERENCE_FOLDER",
    "classify",
    "classify_documents",
    "derive_section",
    "derive_title",
    "extract_keywords",
    "extract_method_name",
    "is_comprehensive_doc",
    "is_rpc_method",
]
