"""Storage models, enumerations, encodings and query filters for indexed Starknet data."""