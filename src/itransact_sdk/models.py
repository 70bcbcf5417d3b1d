"""
Entity and request shapes of the iTransact API

These are typing-only declarations: field names match the wire format
exactly, request payloads are plain dicts built by the caller, and responses
are returned as parsed JSON without any runtime validation. Optional fields
are declared on ``total=False`` subclasses.
"""

from typing import Any, Dict, List, TypedDict


TokenID = str


class MetadataEntry(TypedDict):
    key: str
    value: str


# Ordered key/value pairs; duplicate keys are legal
Metadata = List[MetadataEntry]


class _AddressRequired(TypedDict):
    line1: str
    city: str
    state: str
    postal_code: str


class Address(_AddressRequired, total=False):
    line2: str
    country: str


class PaymentSource(TypedDict):
    id: str
    name: str
    type: str
    savings_account: str
    default: str
    credit_card: str
    check_card: str
    debit_card: str
    commercial_card: str
    prepaid_card: str
    hsa_fsa_account: str
    international_bin: str
    push_funds: str
    fast_funds: str
    last_four_digits: str
    drivers_license_last_four: str
    drivers_license_state: str
    ssn_last_four: str
    expired: str
    month: str
    year: str
    brand: str
    sec_code: str
    bank_name: str
    routing_number: str


class Card(TypedDict):
    name: str
    number: str
    cvv: str
    exp_month: str
    exp_year: str


class _ACHRequired(TypedDict):
    account_number: str
    routing_number: str
    phone_number: str
    sec_code: str
    savings_account: bool


class ACH(_ACHRequired, total=False):
    name: str
    check_number: str
    drivers_license_number: str
    drivers_license_state: str
    ssn_last_four: str


class Token(TypedDict):
    token: str
    used: str
    payment_source: PaymentSource


class Subscription(TypedDict):
    id: str
    description: str
    status: str
    reps: str
    total: str
    recipe: Dict[str, Any]
    payment_source: PaymentSource
    surcharge_amount: str
    payment_source_will_surcharge: str


class Customer(TypedDict):
    id: str
    addresses: List[Address]
    metadata: Metadata
    payment_sources: List[PaymentSource]
    subscriptions: List[Subscription]


class Payout(TypedDict):
    id: str
    amount: int
    authorization_code: str
    avs_category: str
    avs_response: str
    cvv_response: str
    status: str
    metadata: Metadata
    payment_source: PaymentSource


class _PayoutRequestRequired(TypedDict):
    amount: int
    order_number: str
    send_merchant_receipt: bool
    send_customer_receipt: bool


class PayoutRequest(_PayoutRequestRequired, total=False):
    customer_id: str
    card: Card
    token: TokenID
    payment_source_id: str
    address: Address
    metadata: Metadata


class Credit(TypedDict):
    amount: int
    state: str
    settled: bool
    surcharge_amount: str


class Transaction(TypedDict):
    id: str
    xid: str
    created: str
    amount: int
    tax: int
    surcharge_amount: int
    authorized_amount: int
    authorization_code: str
    avs_category: str
    avs_response: str
    cvv_response: str
    balance: int
    status: str
    settled: bool
    instrument: str
    metadata: Metadata
    payment_source: PaymentSource
    credits: List[Credit]


class CustomerPostRequest(TypedDict, total=False):
    metadata: Metadata
    address: Address
    token: TokenID
    ach: ACH
    card: Card


class CustomerCreateRequest(CustomerPostRequest, total=False):
    swipe_data: str


class _CustomerUpdateRequired(TypedDict):
    id: str


class CustomerUpdateRequest(CustomerPostRequest, _CustomerUpdateRequired, total=False):
    default_payment_source_id: str


class _TokenCreateRequired(TypedDict):
    address: Address


class TokenCreateRequest(_TokenCreateRequired, total=False):
    ach: ACH
    card: Card


class _TransactionCreateRequired(TypedDict):
    amount: int
    capture: bool
    tax: int
    order_number: str
    send_merchant_receipt: bool
    send_customer_receipt: bool


class TransactionCreateRequest(_TransactionCreateRequired, total=False):
    customer_id: str
    payment_source_id: str
    card: Card
    ach: ACH
    token: TokenID
    swipe_data: str
    address: Address
    metadata: Metadata
