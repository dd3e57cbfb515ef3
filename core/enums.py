from enum import IntEnum


CID_VERSION = 1


class Multicodec(IntEnum):
    CBOR = 0x51
    RAW = 0x55
    DAG_PB = 0x70
    DAG_CBOR = 0x71
    DAG_JSON = 0x0129
    JSON = 0x0200
