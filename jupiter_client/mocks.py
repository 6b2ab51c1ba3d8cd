from .constants import SOL_MINT, USDC_MINT

USER_PUBLIC_KEY = "8HwPMNxtFDrvxXn1fJsAYB258TnA6Ydr1DWCtVYgRW4W"

USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"

# Mock Jupiter v6 quote response (ExactIn, two hops)
MOCK_QUOTE_RESPONSE = {
    "inputMint": SOL_MINT,
    "inAmount": "100000",
    "outputMint": USDC_MINT,
    "outAmount": "13882",
    "otherAmountThreshold": "13813",
    "swapMode": "ExactIn",
    "slippageBps": 50,
    "platformFee": None,
    "priceImpactPct": "0.0001190284784598",
    "routePlan": [
        {
            "swapInfo": {
                "ammKey": "3QYYvFWgSuGK8bbxMSAYkCqE8QfSuFtByagnZAuekia2",
                "label": "Whirlpool",
                "inputMint": SOL_MINT,
                "outputMint": USDT_MINT,
                "inAmount": "100000",
                "outAmount": "13889",
                "feeAmount": "30",
                "feeMint": SOL_MINT,
            },
            "percent": 100,
        },
        {
            "swapInfo": {
                "ammKey": "CNC5TaeNQEoSPfQKZ7GgfM4R8WYAJRKRSHFCHkf2H7ko",
                "label": "Meteora DLMM",
                "inputMint": USDT_MINT,
                "outputMint": USDC_MINT,
                "inAmount": "13889",
                "outAmount": "13882",
                "feeAmount": "1",
                "feeMint": USDT_MINT,
            },
            "percent": 100,
        },
    ],
    "contextSlot": 287642123,
    "timeTaken": 0.012735604,
}

# Mock Jupiter swap response
MOCK_SWAP_RESPONSE = {
    "swapTransaction": "AQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAACAAQABAgMEBQYHCAkKCwwNDg8QERITFBUWFxgZGhscHR4fICEiIyQlJic=",
    "lastValidBlockHeight": 265870812,
    "prioritizationFeeLamports": 5000,
}

COMPUTE_BUDGET_PROGRAM_ID = "ComputeBudget111111111111111111111111111111"
JUPITER_V6_PROGRAM_ID = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# Mock Jupiter swap-instructions response
MOCK_SWAP_INSTRUCTIONS_RESPONSE = {
    "tokenLedgerInstruction": None,
    "computeBudgetInstructions": [
        {"programId": COMPUTE_BUDGET_PROGRAM_ID, "accounts": [], "data": "AsBcFQA="},
        {"programId": COMPUTE_BUDGET_PROGRAM_ID, "accounts": [], "data": "AwQXAQAAAAAA"},
    ],
    "setupInstructions": [
        {
            "programId": "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL",
            "accounts": [
                {"pubkey": USER_PUBLIC_KEY, "isSigner": True, "isWritable": True},
                {
                    "pubkey": "7u7cD7NxcZEuzRCBaYo8uVpotRdqZwez47vvuwzCov43",
                    "isSigner": False,
                    "isWritable": True,
                },
                {"pubkey": USDC_MINT, "isSigner": False, "isWritable": False},
            ],
            "data": "AQ==",
        }
    ],
    "swapInstruction": {
        "programId": JUPITER_V6_PROGRAM_ID,
        "accounts": [
            {"pubkey": TOKEN_PROGRAM_ID, "isSigner": False, "isWritable": False},
            {"pubkey": USER_PUBLIC_KEY, "isSigner": True, "isWritable": False},
        ],
        "data": "5RfLl3rjrSoBAAAAJmQAAaCGAQAAAAAAOjYAAAAAAAAyAAA=",
    },
    "cleanupInstruction": {
        "programId": TOKEN_PROGRAM_ID,
        "accounts": [
            {"pubkey": USER_PUBLIC_KEY, "isSigner": True, "isWritable": True},
        ],
        "data": "CQ==",
    },
    "otherInstructions": [],
    "addressLookupTableAddresses": [
        "GxS6FiQ3mNnAar9HGQ6mxP7t6FcwmHkU7peSeQDUHmpN",
    ],
    "prioritizationFeeLamports": 0,
}
