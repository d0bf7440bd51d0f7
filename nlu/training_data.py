"""Seed corpus for the statistical intent scorer."""

from typing import Iterator, List, Tuple

from nlu.catalog import Intent

SEED_QUERIES = {
    Intent.SHOW_CONTRACT: [
        "show contract 123456",
        "show me contract 234567",
        "display contract 345678",
        "view contract 456789",
        "open contract number 567890",
        "show contract #1234567",
        "pull up contract 7654321",
        "display the contract 112233",
    ]
    * 3,
    Intent.GET_CONTRACT_INFO: [
        "get contract info for 123456",
        "contract details 234567",
        "what are the details of contract 345678",
        "tell me about contract 456789",
        "contract information for 567890",
        "get details for contract 678901",
        "summary of contract 789012",
    ]
    * 3,
    Intent.GET_CONTRACT_EXPIRATION: [
        "when does contract 123456 expire",
        "expiration date of contract 234567",
        "what is the expiry date for 345678",
        "contract 456789 end date",
        "when will contract 567890 expire",
        "get expiration for contract 678901",
    ]
    * 3,
    Intent.LIST_EXPIRED_CONTRACTS: [
        "expired contracts",
        "show expired contracts",
        "list all expired contracts",
        "which contracts have expired",
        "contracts that lapsed",
        "terminated contracts list",
    ]
    * 3,
    Intent.LIST_ACTIVE_CONTRACTS: [
        "active contracts",
        "show active contracts",
        "list all active contracts",
        "which contracts are active",
        "current contracts in force",
        "ongoing contracts",
    ]
    * 3,
    Intent.FILTER_CONTRACTS_BY_CUSTOMER: [
        "contracts for customer boeing",
        "boeing contracts",
        "show contracts for client honeywell",
        "contracts by customer microsoft",
        "list contracts for account 1234567",
        "customer contracts for oracle",
        "contracts of client acme",
    ]
    * 3,
    Intent.FILTER_CONTRACTS_BY_USER: [
        "contracts created by john",
        "show contracts authored by smith",
        "contracts made by user alice",
        "my contracts",
        "list contracts where owner is bob",
        "contracts by user vinod",
    ]
    * 3,
    Intent.SEARCH_CONTRACTS: [
        "search contracts",
        "search for contracts with pricing",
        "find contracts containing maintenance",
        "look for contracts about software",
        "lookup contract by keyword",
        "find contract named alpha",
    ]
    * 3,
    Intent.LIST_CONTRACTS: [
        "list contracts",
        "list all contracts",
        "show all contracts",
        "all contracts",
        "every contract",
        "list every contract we have",
    ]
    * 3,
    Intent.CONTRACT_STATUS: [
        "status of contract 123456",
        "contract status 234567",
        "is contract 345678 active",
        "what is the state of contract 456789",
        "check status for 567890",
        "contract 678901 status",
    ]
    * 3,
    Intent.CREATE_CONTRACT: [
        "create contract",
        "create a new contract",
        "new contract for boeing",
        "make a contract for account 1234567",
        "draft a contract",
        "set up a contract named alpha",
        "create contract for customer honeywell",
    ]
    * 3,
    Intent.GUIDE_CONTRACT: [
        "how to create a contract",
        "how do i create a contract",
        "help me with contracts",
        "guide me through contract creation",
        "steps to create contract",
        "explain the contract process",
        "walk me through creating a contract",
    ]
    * 3,
    Intent.UPDATE_CONTRACT: [
        "update contract 123456",
        "modify contract 234567",
        "change contract 345678 expiration",
        "edit contract 456789",
        "amend contract 567890",
        "renew contract 678901",
    ]
    * 3,
}


def iter_training_samples(normalizer=None) -> Iterator[Tuple[str, List[str]]]:
    """Yield (label, tokens) pairs, normalized the same way live queries are."""
    for intent, queries in SEED_QUERIES.items():
        for query in queries:
            text = normalizer.normalize(query) if normalizer else query
            yield intent.value, text.split()
