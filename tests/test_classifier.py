from lightdocs.classifiers import (
    FALLBACK_SECTION,
    classify_documents,
    derive_section,
    derive_title,
    extract_keywords,
    extract_method_name,
    is_comprehensive_doc,
    is_rpc_method,
)
from lightdocs.models import RawDocument


def test_section_falls_back_without_subdirectory():
    assert derive_section("intro.md") == FALLBACK_SECTION


def test_section_uses_first_directory():
    assert derive_section("compressed-tokens/overview.md") == "compressed tokens"
    assert derive_section("learn/core-concepts/validity-proofs.md") == "learn"


def test_title_prefers_front_matter():
    assert derive_title("a/file-name.md", {"title": "custom title"}) == "Custom title"


def test_title_falls_back_to_filename():
    assert derive_title("a/how-to-mint.md", {}) == "How to mint"
    assert derive_title("a/how-to-mint.md", {"title": "   "}) == "How to mint"


def test_method_name_from_get_prefix():
    assert extract_method_name("getValidityProof.md", "Some body") == "getValidityProof"


def test_method_name_from_heading():
    assert extract_method_name("overview.md", "Intro line\n# mintTo\nmore") == "mintTo"


def test_method_name_from_backtick_mention():
    body = "Call the `createMint` method to start."
    assert extract_method_name("overview.md", body) == "createMint"


def test_method_name_heading_wins_over_backtick():
    body = "Use the `foo` method first.\n# bar\n"
    assert extract_method_name("overview.md", body) == "bar"


def test_method_name_absent():
    assert extract_method_name("overview.md", "# Two words\nplain text") is None


def test_keywords_collects_all_sources():
    keywords = extract_keywords(
        body="Use `mintTo` with the rpc endpoint. `ab` is too short.",
        title="Compressed Tokens Overview",
        method_name="getCompressedAccount",
    )
    assert {"compressed", "tokens", "overview"} <= keywords
    assert {"getcompressedaccount", "get", "account"} <= keywords
    assert "mintto" in keywords
    assert {"rpc", "endpoint"} <= keywords
    assert "ab" not in keywords


def test_keywords_are_deduplicated():
    keywords = extract_keywords(body="`token` `token` `Token` token", title="Token token")
    as_list = list(keywords)
    assert isinstance(keywords, frozenset)
    assert len(as_list) == len(set(as_list))
    assert "token" in keywords


def test_rpc_method_flag():
    assert is_rpc_method("docs/json-rpc-methods/getX.md", "getX.md")
    assert not is_rpc_method("docs/json-rpc-methods/README.md", "README.md")
    assert not is_rpc_method("docs/json-rpc-methods/rpcmethods.md", "rpcmethods.md")
    assert not is_rpc_method("docs/guides/getX.md", "getX.md")


def test_comprehensive_flag():
    assert is_comprehensive_doc("rpcmethods.md", "", "Json")
    assert is_comprehensive_doc("x.md", "## Mainnet ZK Compression API endpoints\n", "X")
    assert is_comprehensive_doc("x.md", "", "Tokens Overview")
    assert is_comprehensive_doc("x.md", "", "List all things")
    assert not is_comprehensive_doc("x.md", "plain", "Validity proofs")


def test_classify_documents_skips_empty_bodies(documents):
    paths = {doc.relative_path for doc in documents}
    assert "empty.md" not in paths
    assert "intro.md" in paths


def test_classify_documents_skips_failures_and_continues():
    raws = [
        RawDocument(path="a.md", relative_path="a.md", frontmatter={}, body="   "),
        RawDocument(path="b.md", relative_path="b.md", frontmatter={}, body="Body"),
    ]
    documents = classify_documents(raws)
    assert [doc.relative_path for doc in documents] == ["b.md"]


def test_loaded_documents_satisfy_invariants(documents):
    assert documents
    for doc in documents:
        assert doc.title
        assert doc.content
        assert doc.section
        assert doc.title[0] == doc.title[0].upper()


def test_sample_corpus_classification(docs_by_path):
    account = docs_by_path["json-rpc-methods/getCompressedAccount.md"]
    assert account.is_rpc_method
    assert account.method_name == "getCompressedAccount"
    assert account.section == "json rpc methods"

    listing = docs_by_path["json-rpc-methods/rpcmethods.md"]
    assert listing.is_comprehensive_doc
    assert not listing.is_rpc_method
    assert listing.title == "JSON RPC methods"

    readme = docs_by_path["json-rpc-methods/README.md"]
    assert not readme.is_rpc_method

    overview = docs_by_path["compressed-tokens/overview.md"]
    assert overview.is_comprehensive_doc
    assert overview.title == "Compressed Tokens Overview"
    assert overview.method_name is None
