"""
Optional well-formed request made before the raw suite, to tell apart
"the target is down" from "the target rejects everything"
"""

import requests


def preflight(config, path="/"):
    """Return (ok, message). Never raises; the suite runs either way."""
    url = f"http://{config.target}:{config.port}{path}"
    try:
        response = requests.get(
            url,
            timeout=config.timeout,
            allow_redirects=False,
            headers={"Connection": "close"},
        )
    except requests.RequestException as e:
        return False, f"{url} unreachable: {e}"

    return True, f"{url} answered {response.status_code} {response.reason}"
