"""Shared fixtures for the Booli MCP tests."""

import json
from unittest.mock import AsyncMock

import pytest

from booli_mcp.config import ClientConfig


class FakeResponse:
    """Stands in for aiohttp's response context manager."""

    def __init__(self, status=200, body=None):
        self.status = status
        self._body = body if isinstance(body, str) else json.dumps(body or {})

    async def text(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self, transport, **kwargs):
        self.transport = transport
        self.kwargs = kwargs

    def post(self, url, json=None):
        self.transport.requests.append({'url': url, 'json': json, 'session': self.kwargs})
        if self.transport.error is not None:
            raise self.transport.error
        return self.transport.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeTransport:
    """Session factory recording every POST made through it."""

    def __init__(self):
        self.response = FakeResponse(body={'data': {}})
        self.error = None
        self.requests = []

    def respond(self, status=200, body=None):
        self.response = FakeResponse(status=status, body=body)

    def __call__(self, **kwargs):
        return FakeSession(self, **kwargs)

    @property
    def last_query(self):
        return self.requests[-1]['json']['query']


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def client_config():
    return ClientConfig(graphql_url='https://booli.test/graphql')


@pytest.fixture
def mock_client(client_config):
    """Client double with async methods and a real configuration."""
    client = AsyncMock()
    client.config = client_config
    return client


@pytest.fixture
def full_entry():
    """A result entry with every field the normalizer reads populated."""
    return {
        'id': '12345',
        'objectType': 'Lägenhet',
        'streetAddress': 'Storgatan 15',
        'descriptiveAreaName': 'Södermalm',
        'location': {'region': {'municipalityName': 'Stockholm'}},
        'rooms': {'value': '3', 'formatted': '3 rum'},
        'livingArea': {'value': '75', 'formatted': '75 m²'},
        'plotArea': {'value': '450', 'formatted': '450 m²'},
        'listPrice': {'value': '4500000', 'formatted': '4 500 000 kr', 'unit': 'SEK', 'raw': 4500000},
        'listSqmPrice': {'formatted': '60 000 kr/m²'},
        'rent': {'formatted': '3 200 kr/mån'},
        'estimate': {'price': {'formatted': '4 700 000 kr'}},
        'tenureForm': 'Bostadsrätt',
        'floor': 3,
        'constructionYear': 1929,
        'daysActive': 15,
        'published': '2024-01-15',
        'listPricePercentageDiff': -5.5,
        'biddingOpen': True,
        'upcomingSale': True,
        'isNewConstruction': True,
        'amenities': [
            {'key': 'balcony', 'label': 'Balkong'},
            {'key': 'elevator', 'label': 'Hiss'},
        ],
        'displayAttributes': {
            'dataPoints': [
                {'value': {'plainText': '3 tr'}},
                {'value': {'plainText': 'Avgift 3 200 kr'}},
                {'value': None},
            ]
        },
        'agency': {
            'name': 'Fastighetsbyrån',
            'url': 'https://fastighetsbyran.se',
            'thumbnail': 'https://fastighetsbyran.se/logo.png',
        },
        'primaryImage': {'alt': 'Vardagsrum', 'url': 'https://bcdn.se/images/1.jpg'},
        'blockedImages': False,
        'nextShowing': '2024-01-20T13:00:00',
        'latitude': 59.3142,
        'longitude': 18.0712,
        'url': '/annons/12345',
    }


@pytest.fixture
def location_suggestions():
    return [
        {
            'id': '509',
            'displayName': 'Ektorp',
            'parent': 'Nacka',
            'parentType': 'Kommun',
            'parentDisplayName': 'Nacka kommun',
            'parentTypeDisplayName': 'Kommun',
            'parentId': '76',
        },
        {
            'id': '2',
            'displayName': 'Stockholm',
            'parent': '',
            'parentType': '',
            'parentDisplayName': '',
            'parentTypeDisplayName': '',
            'parentId': '',
        },
    ]
