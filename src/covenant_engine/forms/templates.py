from __future__ import annotations

from covenant_engine.forms.data import FormData
from covenant_engine.markup import signature_field

BLANK = "___"


def format_amount(amount: float | None) -> str:
    if amount is None:
        return BLANK
    return f"{amount:,.2f}"


def promissory_note(data: FormData, *, state: str) -> str:
    amount = format_amount(data.amount)
    lender = data.lender or BLANK
    if data.date:
        payment = f"Payment shall be made in full on {data.date}."
    else:
        payment = "Payment shall be made immediately upon demand by Lender."

    return f"""
# PROMISSORY NOTE (UCC § 3-104 Compliant)

**Principal Amount:** ${amount}
**Date:** {data.date or "On Demand"}

FOR VALUE RECEIVED, the undersigned ("Borrower") promises to pay to the order of **{lender}** ("Lender") the principal sum of **${amount}** USD.

**1. PAYMENT.**
{payment}

**2. UNCONDITIONAL PROMISE.**
This Note represents an unconditional promise to pay and is not subject to any other agreement.

**3. GOVERNING LAW.**
This Note shall be governed by the Uniform Commercial Code as adopted in the State of {state}.

**4. WAIVERS.**
Borrower waives presentment, demand, protest, and notice of dishonor.

**5. EXECUTION.**
The parties hereby execute this Note as of the date first written above.

{signature_field("Borrower Signature")}
**{data.borrower or "Borrower"}**

{signature_field("Lender Signature")}
**{data.lender or "Lender"}**
"""


def security_agreement(data: FormData, *, state: str, today: str) -> str:
    debtor = data.debtor or data.borrower or "Debtor"
    secured_party = data.secured_party or data.lender or "Secured Party"
    agreement_date = data.date or today
    obligation = data.obligation or f"Promissory Note dated {data.date or 'even date herewith'}"

    return f"""
# SECURITY AGREEMENT (UCC Article 9)

This Security Agreement is entered into on **{agreement_date}** between **{debtor}** ("Debtor") and **{secured_party}** ("Secured Party").

**1. GRANT OF SECURITY INTEREST.**
Debtor hereby grants to Secured Party a security interest in the property described below ("Collateral") to secure the payment and performance of the obligation described as: {obligation}.

**2. COLLATERAL DESCRIPTION.**
The Collateral consists of the following:
> {data.collateral}

**3. PERFECTION.**
Debtor authorizes Secured Party to file a financing statement (UCC-1) to perfect this Security Interest.

**4. DEFAULT.**
Upon default, Secured Party shall have all rights and remedies of a secured party under the Uniform Commercial Code of {state}.

{signature_field("Debtor Authentication")}
**{debtor}**
"""


def bill_of_sale(data: FormData, *, today: str) -> str:
    return f"""
# BILL OF SALE (UCC Article 2)

**Seller:** {data.seller or BLANK}
**Buyer:** {data.buyer or BLANK}
**Date:** {data.date or today}
**Consideration:** ${format_amount(data.amount)}

FOR VALUE RECEIVED, Seller hereby sells, transfers, and conveys to Buyer the following goods (the "Goods"):

**DESCRIPTION OF GOODS:**
{data.goods_description or "[Insert Description and Serial Numbers]"}

**WARRANTIES:**
Seller warrants that they have good and marketable title to the Goods, free of all liens and encumbrances. The Goods are sold "AS-IS" unless otherwise expressly stated.

{signature_field("Seller")}
**{data.seller or "Seller"}**

{signature_field("Buyer")}
**{data.buyer or "Buyer"}**
"""


def contractor_agreement(data: FormData) -> str:
    client = data.client or "Client"
    contractor = data.contractor or "Contractor"

    return f"""
# INDEPENDENT CONTRACTOR AGREEMENT

This Agreement is made between **{client}** and **{contractor}**.

**1. SERVICES.**
Contractor agrees to perform the following services:
{data.services or "[Describe Services]"}

**2. INDEPENDENT CONTRACTOR STATUS.**
Contractor is an independent contractor, not an employee. Contractor is responsible for all taxes (including Self-Employment Tax). Client shall not withhold taxes or provide benefits.

**3. WORK FOR HIRE.**
All deliverables created under this Agreement shall be considered "Work Made for Hire" and shall be the sole property of the Client.

**4. CONFIDENTIALITY.**
Contractor acknowledges access to confidential information and agrees not to disclose such information to third parties.

{signature_field("Contractor")}
**{contractor}**

{signature_field("Client")}
**{client}**
"""


def blocked(reason: str) -> str:
    return f"> **GENERATION BLOCKED**: Protocol Violation.\n> Reason: {reason}"
