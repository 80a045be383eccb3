import json
import sys
import uuid
import requests

API_ROOT = "http://localhost:8000/api/v1"
CUSTOMER = {"name": "Smoke Test", "email": "smoke@example.com"}

def show(step, response):
    print(f"[{step}] HTTP {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)

def cart_call(api_root, session_id, action, **fields):
    body = {"action": action, "sessionId": session_id, **fields}
    return requests.post(f"{api_root}/cart-operations", json=body)

def smoke_test(api_root=API_ROOT):
    """Walk one anonymous shopper through browse, cart, checkout and clear."""
    shopper = str(uuid.uuid4())

    catalog = requests.get(f"{api_root}/products/")
    show("catalog", catalog)
    if not catalog.ok or not catalog.json():
        print("Catalog is empty; seed it with `python seed_data.py` first.")
        return False

    first = catalog.json()[0]["id"]
    for _ in range(2):
        show("add", cart_call(api_root, shopper, "add", productId=first, quantity=1))
    show("cart", cart_call(api_root, shopper, "get"))

    receipt = requests.post(f"{api_root}/checkout", json={"sessionId": shopper, "customerInfo": CUSTOMER})
    show("checkout", receipt)

    show("clear", cart_call(api_root, shopper, "clear"))
    return receipt.ok

if __name__ == "__main__":
    sys.exit(0 if smoke_test() else 1)
