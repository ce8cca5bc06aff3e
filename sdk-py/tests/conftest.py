"""Shared fixtures for nahmii SDK tests."""

import json

import pytest
from eth_account import Account

from nahmii_sdk import (
    Currency,
    DeploymentRegistry,
    MonetaryAmount,
    Network,
    Payment,
    Receipt,
)

PAYER_KEY = "0x" + "11" * 32
RECIPIENT_KEY = "0x" + "22" * 32
OPERATOR_KEY = "0x" + "33" * 32
STRANGER_KEY = "0x" + "44" * 32

CONTRACT_NAME = "SomeContractAbstraction"
CONTRACT_ADDRESS = "0x1234567890123456789012345678901234567890"
CHAIN_ID = "123456789"

TOKEN = Currency(ct="0x0000000000000000000000000000000000000abc", id="0")


class FakeProvider:
    """Provider double returning canned cluster information and code."""

    def __init__(self, chain_id=CHAIN_ID, name="homestead", operator_address=None):
        self.network = Network(chain_id=chain_id, name=name)
        self.operator_address = operator_address
        self.cluster_information = {
            "ethereum": {
                "net": name,
                "contracts": {
                    "contract1": "0x0000000000000000000000000000000000000001",
                    CONTRACT_NAME: CONTRACT_ADDRESS,
                    "contract3": "0x0000000000000000000000000000000000000003",
                },
            }
        }
        self.code = "0xdeadbeef"
        self.cluster_requests = 0
        self.code_requests = []

    def get_cluster_information(self):
        self.cluster_requests += 1
        return self.cluster_information

    def get_code(self, address):
        self.code_requests.append(address)
        return self.code


class FakeWallet:
    def __init__(self, provider):
        self.provider = provider


def address_of(private_key):
    return Account.from_key(private_key).address


@pytest.fixture
def operator_address():
    return address_of(OPERATOR_KEY)


@pytest.fixture
def provider(operator_address):
    return FakeProvider(operator_address=operator_address)


@pytest.fixture
def payment(provider):
    return Payment(
        provider,
        MonetaryAmount(amount=1000, currency=TOKEN),
        sender=address_of(PAYER_KEY),
        recipient=address_of(RECIPIENT_KEY),
    )


@pytest.fixture
def signed_payment(payment):
    payment.sign(PAYER_KEY)
    return payment


@pytest.fixture
def receipt(provider, signed_payment):
    receipt = Receipt(provider, signed_payment)
    receipt.nonce = 7
    receipt.sender.nonce = 3
    receipt.sender.current_balance = 8000
    receipt.sender.previous_balance = 9000
    receipt.sender.single_fee = MonetaryAmount(amount=10, currency=TOKEN)
    receipt.sender.net_fees = [MonetaryAmount(amount=10, currency=TOKEN)]
    receipt.recipient.nonce = 5
    receipt.recipient.current_balance = 2000
    receipt.recipient.previous_balance = 1000
    receipt.single_transfer = 1000
    receipt.net_transfer = 1000
    return receipt


def write_deployment(root, network_name, contract_name, deployment):
    directory = root / network_name
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{contract_name}.json").write_text(json.dumps(deployment))


@pytest.fixture
def deployment():
    return {"networks": {CHAIN_ID: {"address": CONTRACT_ADDRESS}}, "abi": []}


@pytest.fixture
def registry(tmp_path, deployment):
    write_deployment(tmp_path, "homestead", CONTRACT_NAME, deployment)
    write_deployment(tmp_path, "homestead", "NullSettlement", deployment)
    return DeploymentRegistry.from_directory(tmp_path)
