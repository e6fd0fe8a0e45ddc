"""Chain RPC client - slots, blocks, accounts, tokens, programs, cluster."""

from rpc_client.base import BaseClient


class ChainClient(BaseClient):
    """Client for the read-only chain RPC methods."""

    # Node / cluster

    async def get_health(self) -> str:
        """getHealth - 'ok' or raises."""
        return await self._call("getHealth")

    async def get_slot(self) -> int:
        """getSlot - current slot at the configured commitment."""
        return await self._call("getSlot", [{"commitment": self.commitment}])

    async def get_transaction_count(self) -> int:
        """getTransactionCount - total transactions processed by the ledger."""
        return await self._call("getTransactionCount", [{"commitment": self.commitment}])

    async def get_epoch_info(self) -> dict:
        """getEpochInfo - epoch, slot index and slots in epoch."""
        return await self._call("getEpochInfo", [{"commitment": self.commitment}])

    async def get_supply(self) -> dict:
        """getSupply - total, circulating and non-circulating lamports."""
        return await self._call_value(
            "getSupply",
            [{"commitment": self.commitment, "excludeNonCirculatingAccountsList": True}],
        )

    async def get_recent_performance_samples(self, limit: int = 5) -> list[dict]:
        """getRecentPerformanceSamples - recent TPS samples."""
        return await self._call("getRecentPerformanceSamples", [limit])

    async def get_cluster_nodes(self) -> list[dict]:
        """getClusterNodes - nodes participating in the cluster."""
        return await self._call("getClusterNodes")

    # Blocks / fees

    async def get_block(self, slot: int) -> dict | None:
        """getBlock - full block for a slot, None when not produced."""
        return await self._call(
            "getBlock",
            [
                slot,
                {
                    "commitment": self.commitment,
                    "encoding": "json",
                    "maxSupportedTransactionVersion": 0,
                    "transactionDetails": "full",
                    "rewards": False,
                },
            ],
        )

    async def get_latest_blockhash(self) -> dict:
        """getLatestBlockhash - {blockhash, lastValidBlockHeight}."""
        return await self._call_value("getLatestBlockhash", [{"commitment": self.commitment}])

    async def get_recent_prioritization_fees(self) -> list[dict]:
        """getRecentPrioritizationFees - [{slot, prioritizationFee}]."""
        return await self._call("getRecentPrioritizationFees")

    # Accounts

    async def get_balance(self, pubkey: str) -> int:
        """getBalance - lamports held by an account."""
        return await self._call_value("getBalance", [pubkey, {"commitment": self.commitment}])

    async def get_account_info(self, pubkey: str, encoding: str = "base64") -> dict | None:
        """getAccountInfo - account or None when it does not exist."""
        return await self._call_value(
            "getAccountInfo",
            [pubkey, {"commitment": self.commitment, "encoding": encoding}],
        )

    async def get_multiple_accounts(self, pubkeys: list[str], encoding: str = "base64") -> list[dict | None]:
        """getMultipleAccounts - accounts in request order, None for missing ones."""
        return await self._call_value(
            "getMultipleAccounts",
            [pubkeys, {"commitment": self.commitment, "encoding": encoding}],
        )

    async def get_signatures_for_address(
        self,
        pubkey: str,
        limit: int = 10,
        before: str | None = None,
        until: str | None = None,
    ) -> list[dict]:
        """getSignaturesForAddress - newest first."""
        options: dict = {"commitment": self.commitment, "limit": limit}
        if before:
            options["before"] = before
        if until:
            options["until"] = until
        return await self._call("getSignaturesForAddress", [pubkey, options])

    # Transactions

    async def get_transaction(self, signature: str) -> dict | None:
        """getTransaction - confirmed transaction or None."""
        return await self._call(
            "getTransaction",
            [
                signature,
                {
                    "commitment": self.commitment,
                    "encoding": "json",
                    "maxSupportedTransactionVersion": 0,
                },
            ],
        )

    async def get_signature_status(self, signature: str) -> dict | None:
        """getSignatureStatuses for one signature, searching the full history."""
        statuses = await self._call_value(
            "getSignatureStatuses",
            [[signature], {"searchTransactionHistory": True}],
        )
        return statuses[0] if statuses else None

    # Tokens / programs

    async def get_token_supply(self, mint: str) -> dict | None:
        """getTokenSupply - {amount, decimals, uiAmount, uiAmountString}."""
        return await self._call_value("getTokenSupply", [mint, {"commitment": self.commitment}])

    async def get_token_largest_accounts(self, mint: str) -> list[dict]:
        """getTokenLargestAccounts - the 20 largest accounts of a mint."""
        return await self._call_value(
            "getTokenLargestAccounts",
            [mint, {"commitment": self.commitment}],
        )

    async def get_token_accounts_by_owner(self, owner: str, program_id: str) -> list[dict]:
        """getTokenAccountsByOwner - parsed token accounts of an owner."""
        return await self._call_value(
            "getTokenAccountsByOwner",
            [
                owner,
                {"programId": program_id},
                {"commitment": self.commitment, "encoding": "jsonParsed"},
            ],
        )

    async def get_program_accounts(
        self,
        program_id: str,
        filters: list[dict] | None = None,
        data_slice: dict | None = None,
    ) -> list[dict]:
        """getProgramAccounts - accounts owned by a program."""
        options: dict = {"commitment": self.commitment, "encoding": "base64"}
        if filters:
            options["filters"] = filters
        if data_slice is not None:
            options["dataSlice"] = data_slice
        return await self._call("getProgramAccounts", [program_id, options])
