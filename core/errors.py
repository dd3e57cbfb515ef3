class BlockStoreError(Exception):
    pass


class DecodeError(BlockStoreError, ValueError):
    pass


class EncodeError(BlockStoreError, ValueError):
    pass


class MaximumBlockSizeExceeded(BlockStoreError, ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"block_too_large: {size} > {limit}")
        self.size = size
        self.limit = limit


class BlockNotFound(BlockStoreError, KeyError):
    def __init__(self, cid: str):
        super().__init__(cid)
        self.cid = cid

    def __str__(self) -> str:
        return f"block_not_found: {self.cid}"
