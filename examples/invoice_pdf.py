"""
Example: find posted invoices of one customer and save the first one as PDF.
Reads ODOO_HOST, ODOO_DATABASE, ODOO_USERNAME, ODOO_PASSWORD from the environment.
To run: python examples/invoice_pdf.py "Acme"
"""
import logging
import sys
from pathlib import Path

import httpx

from odoo_client import OdooClient, load_config_from_env

logging.basicConfig(level=logging.DEBUG)

config = load_config_from_env(endpoint_cache_size=3, max_poll_attempts=60)
customer = sys.argv[1] if len(sys.argv) > 1 else "Acme"

with httpx.Client(timeout=30.0) as http, OdooClient.from_config(config, transport=http) as client:
    print("Server:", client.version().get("server_version"))
    partner_ids = client.search("res.partner", [["name", "ilike", customer]], limit=1)
    if not partner_ids:
        raise SystemExit(f"No partner matching {customer!r}")
    invoice_ids = client.search(
        "account.move",
        [["partner_id", "=", partner_ids[0]], ["state", "=", "posted"]],
    )
    if not invoice_ids:
        raise SystemExit("No posted invoices")
    invoice = client.read("account.move", invoice_ids[:1], ["name"])[0]
    pdf = client.get_report("account.move", invoice_ids)
    out = Path(f"{invoice['name'].replace('/', '_')}.pdf")
    out.write_bytes(pdf)
    print(f"Saved {out} ({len(pdf)} bytes)")
