"""Pure aggregations over cached transaction payloads."""

import polars as pl

PROGRAM_SCHEMA = {"signature": pl.Utf8, "program_id": pl.Utf8, "success": pl.Boolean}


def _account_key(key) -> str:
    # jsonParsed encodings return {"pubkey": ...} objects
    return key["pubkey"] if isinstance(key, dict) else key


def instruction_programs(tx: dict) -> list[str]:
    """Program ids invoked by a transaction's top-level instructions, in order, deduplicated."""
    message = (tx.get("transaction") or {}).get("message") or {}
    keys = [_account_key(k) for k in message.get("accountKeys", [])]
    loaded = (tx.get("meta") or {}).get("loadedAddresses") or {}
    keys += loaded.get("writable", []) + loaded.get("readonly", [])

    programs: list[str] = []
    for ix in message.get("instructions", []):
        if "programId" in ix:
            program = ix["programId"]
        else:
            idx = ix.get("programIdIndex")
            if idx is None or idx >= len(keys):
                continue
            program = keys[idx]
        if program not in programs:
            programs.append(program)
    return programs


def is_successful(tx: dict) -> bool:
    return (tx.get("meta") or {}).get("err") is None


def success_rate(transactions: list[dict]) -> float | None:
    """Share of successful transactions, or None without data."""
    if not transactions:
        return None
    ok = sum(1 for tx in transactions if is_successful(tx))
    return round(ok / len(transactions), 4)


def average_slot_time_ms(samples: list[dict]) -> float | None:
    """Mean slot duration over performance samples."""
    slots = sum(s.get("numSlots", 0) for s in samples)
    secs = sum(s.get("samplePeriodSecs", 0) for s in samples)
    if not slots:
        return None
    return round(secs * 1000 / slots, 1)


def program_activity(transactions: list[dict], limit: int) -> list[dict]:
    """Programs ranked by the number of transactions invoking them.

    `transactions` are {"signature", "data"} rows; a transaction invoking
    the same program twice counts once.
    """
    rows = [
        {"signature": row["signature"], "program_id": program, "success": is_successful(row["data"])}
        for row in transactions
        for program in instruction_programs(row["data"])
    ]
    if not rows:
        return []

    df = pl.DataFrame(rows, schema=PROGRAM_SCHEMA)
    ranked = (
        df.group_by("program_id")
        .agg(
            pl.col("signature").n_unique().alias("transaction_count"),
            (pl.col("success").mean() * 100).round(2).alias("success_rate"),
        )
        .sort(["transaction_count", "program_id"], descending=[True, False])
        .head(limit)
    )
    return [
        {
            "programId": r["program_id"],
            "transactionCount": r["transaction_count"],
            "successRate": r["success_rate"],
        }
        for r in ranked.iter_rows(named=True)
    ]
