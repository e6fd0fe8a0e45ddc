"""Application settings."""

import os
from pathlib import Path

# Environment
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
IS_PRODUCTION = ENVIRONMENT == "production"

# Database
DB_PATH = os.getenv("CHAIN_CACHE_DB_PATH", "chain_cache.duckdb")

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Upstream RPC
RPC_URL = os.getenv("HTTPS_RPC", "https://rpc.gorbchain.xyz")
RPC_TIMEOUT = float(os.getenv("RPC_TIMEOUT", "30"))
RPC_MAX_CONCURRENT = int(os.getenv("RPC_MAX_CONCURRENT", "20"))
RPC_COMMITMENT = os.getenv("RPC_COMMITMENT", "confirmed")

# Cache
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "300"))
CACHE_WRITE_WORKERS = int(os.getenv("CACHE_WRITE_WORKERS", "4"))

# Token program (SPL token fork used by the chain)
TOKEN_PROGRAM_ID = os.getenv("TOKEN_PROGRAM_ID", "J35jQQ3KKuMwTioVFLnjXdrFrUEc99eTwT2rWZ2EsxcN")
MINT_SIZE = int(os.getenv("MINT_SIZE", "82"))

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
