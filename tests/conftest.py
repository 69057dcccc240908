import pytest

from lightdocs.classifiers import classify_documents
from lightdocs.search import DocsSearchEngine
from lightdocs.sources import load_documents

GET_COMPRESSED_ACCOUNT = """# getCompressedAccount

Returns the compressed account with the given address or hash.

```typescript
const account = await rpc.getCompressedAccount(address);
```

## Parameters

| Name | Type | Description |
| --- | --- | --- |
| address | string | Account address |

## Response

Returns the account data and its `lamports` balance.
"""

GET_TOKEN_BALANCES = """Returns the token balances for every mint held by an owner.

## Parameters

- `owner`: the owner public key
- `mint`: optional mint filter

## Example

```bash
curl -X POST https://mainnet.helius-rpc.com
```
"""

RPC_LISTING = """---
title: JSON RPC methods
---
The ZK Compression RPC exposes the following methods.

## Mainnet ZK Compression API endpoints

| Method | Description |
| --- | --- |
| getCompressedAccount | Fetch one compressed account |
| getCompressedTokenBalancesByOwner | Token balances for an owner |
"""

RPC_README = """# JSON RPC

Start here for the RPC reference.
"""

TOKENS_OVERVIEW = """---
title: Compressed Tokens Overview
---
Compressed tokens reduce the cost of token accounts by storing state in ledger space.

## Key features

- Mint and transfer compressed tokens
- Decompress a token into a regular SPL account

## Next steps

Create your first token pool with the guide.
"""

TOKEN_POOL_GUIDE = """---
title: Creating a token pool guide
---
Step one: register the mint.

Step two: fund the pool with an example transfer.

```typescript
await createTokenPool(rpc, payer, mint);
```
"""

VALIDITY_PROOFS = """Validity proofs show that compressed state exists.

They are verified on chain with a constant size.
"""

INTRO = """Welcome to the ZK Compression documentation.

Read the learn section first.
"""

BROKEN = """---
title: [unclosed
---
This document has malformed front matter.
"""

EMPTY = """---
title: Empty
---

"""

SAMPLE_CORPUS = {
    "json-rpc-methods/getCompressedAccount.md": GET_COMPRESSED_ACCOUNT,
    "json-rpc-methods/getCompressedTokenBalancesByOwner.md": GET_TOKEN_BALANCES,
    "json-rpc-methods/rpcmethods.md": RPC_LISTING,
    "json-rpc-methods/README.md": RPC_README,
    "compressed-tokens/overview.md": TOKENS_OVERVIEW,
    "guides/creating-a-token-pool.md": TOKEN_POOL_GUIDE,
    "learn/core-concepts/validity-proofs.md": VALIDITY_PROOFS,
    "intro.md": INTRO,
    "broken.md": BROKEN,
    "empty.md": EMPTY,
}


@pytest.fixture
def corpus():
    return dict(SAMPLE_CORPUS)


@pytest.fixture
def documents(corpus):
    return classify_documents(load_documents(corpus))


@pytest.fixture
def docs_by_path(documents):
    return {doc.relative_path: doc for doc in documents}


@pytest.fixture
def engine(corpus):
    engine = DocsSearchEngine(corpus)
    engine.load()
    return engine


@pytest.fixture
def docs_root(tmp_path, corpus):
    root = tmp_path / "compression-docs"
    for rel_path, text in corpus.items():
        target = root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root
