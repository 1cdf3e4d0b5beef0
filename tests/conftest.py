import pytest

from bitly_api.client import BitlyClient

API_ROOT = "http://api.bit.ly/v3"
LOGIN = "bitlyapidemo"
API_KEY = "R_0da49e0a9118ff35f52f629d2d71bf07"


@pytest.fixture
def client():
    return BitlyClient(LOGIN, API_KEY)


@pytest.fixture
def shorten_response():
    return {
        "status_code": 200,
        "status_txt": "OK",
        "data": {
            "long_url": "http://www.google.com/",
            "url": "http://bit.ly/SD3eqa",
            "hash": "SD3eqa",
            "global_hash": "2V6CFi",
            "new_hash": 0,
        },
    }


@pytest.fixture
def expand_response():
    return {
        "status_code": 200,
        "status_txt": "OK",
        "data": {
            "expand": [
                {
                    "short_url": "http://bit.ly/3CzY1f",
                    "long_url": "http://betaworks.com/",
                    "user_hash": "3CzY1f",
                    "global_hash": "3CzY1f",
                }
            ]
        },
    }


@pytest.fixture
def clicks_response():
    return {
        "status_code": 200,
        "status_txt": "OK",
        "data": {
            "clicks": [
                {
                    "short_url": "http://bit.ly/3CzY1f",
                    "global_hash": "3CzY1f",
                    "user_clicks": 1204,
                    "user_hash": "3CzY1f",
                    "global_clicks": 5810,
                }
            ]
        },
    }


@pytest.fixture
def errors_response():
    return {
        "errorCode": 0,
        "errorMessage": "",
        "results": [
            {"errorCode": 0, "errorMessage": "Success"},
            {"errorCode": 203, "errorMessage": "You must be authenticated to access shorten"},
            {"errorCode": 1206, "errorMessage": "URL you tried to shorten was invalid."},
        ],
        "statusCode": "OK",
    }
