"""Starknet helpers: ABI interface detection, bridged tokens, hash validation and proxy keys."""