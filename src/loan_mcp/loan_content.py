"""
Personal loan product copy served by getPersonalLoanInfo.

Plain data only; edit here without touching request handling.
"""

LOAN_INFO = {
    "overview": {
        "title": "Bajaj Finserv Personal Loan Overview",
        "description": (
            "Apply for instant personal loan online of up to ₹55 lakh with minimal "
            "documentation and simple eligibility criteria."
        ),
        "highlights": [
            "💰 Loan Amount: ₹40,000 to ₹55 lakh",
            "⏱️ Quick disbursal in 24 hours*",
            "📝 Minimal documentation",
            "🔒 No collateral required",
            "💯 No hidden charges",
            "📊 Interest rates starting @ 10% p.a.",
            "📅 Flexible tenures: 12 to 96 months",
        ],
        "url": "https://www.bajajfinserv.in/personal-loan",
    },
    "eligibility": {
        "title": "Personal Loan Eligibility Criteria",
        "criteria": {
            "nationality": "Indian",
            "age": "21 years to 80 years",
            "employedWith": "Public, private, or MNC",
            "cibilScore": "650 or higher",
            "customerProfile": "Self-employed or Salaried",
        },
        "note": "You should be 80 years or younger at the end of the loan tenure.",
    },
    "features": {
        "title": "Key Features & Benefits",
        "features": [
            {
                "name": "Disbursal in 24 hours",
                "description": (
                    "Your loan amount will be credited to your account within 24 hours* "
                    "of application approval."
                ),
            },
            {
                "name": "Flexible tenures",
                "description": (
                    "Plan your loan repayment and choose tenure that suits you best "
                    "(12 to 96 months)."
                ),
            },
            {
                "name": "No collateral",
                "description": "You do not need any collateral or guarantor to get your loan.",
            },
            {
                "name": "No hidden charges",
                "description": "All applicable fees and charges are mentioned up front.",
            },
            {
                "name": "3 unique variants",
                "description": (
                    "Pick the loan variant that suits you best: Term loan, Flexi Term "
                    "(Dropline) Loan, and Flexi Hybrid Term Loan."
                ),
            },
            {
                "name": "Loan of up to ₹55 lakh",
                "description": (
                    "Manage your small or large expenses with loans ranging from "
                    "₹40,000 to ₹55 lakh."
                ),
            },
            {
                "name": "Approval in just 5 minutes",
                "description": "Complete your entire application online and get instant approval.",
            },
        ],
    },
    "interest_rates": {
        "title": "Personal Loan Interest Rate and Charges",
        "charges": [
            {"type": "Rate of interest per annum", "amount": "10% to 31% p.a."},
            {"type": "Processing fees", "amount": "Up to 3.93% of loan amount (inclusive of taxes)"},
            {"type": "Bounce charges", "amount": "₹700 to ₹1,200 per bounce"},
            {
                "type": "Prepayment charges (Term Loan)",
                "amount": "Up to 4.72% (inclusive of taxes) on outstanding amount",
            },
            {"type": "Flexi Facility Charge", "amount": "₹1,999 to ₹12,999 (for Flexi Loans only)"},
            {"type": "Penal charge", "amount": "Up to 36% per annum from due date"},
        ],
        "note": "Stamp duty is payable as per state laws and deducted upfront from loan amount.",
    },
    "documents": {
        "title": "Documents Required for Personal Loan",
        "documents": [
            "PAN Card",
            "Aadhaar Card / Passport / Voter ID / Driving License",
            "Latest 3 months salary slips",
            "Last 3 months bank account statements",
            "Employee ID card",
            "Address proof (utility bill, property tax receipt, etc.)",
            "Recent photograph",
        ],
        "note": "Additional documents may be required based on your profile.",
    },
    "variants": {
        "title": "Compare Personal Loan Variants",
        "variants": [
            {
                "name": "Term Loan",
                "description": "Fixed EMIs that cover both principal and interest",
                "features": [
                    "Fixed EMI throughout tenure",
                    "Predictable payments",
                    "Simple structure",
                    "Best for regular income",
                    "Tenure: 12 to 96 months",
                ],
                "charges": "No Flexi facility charges",
                "partPrepayment": "Up to 4.72% (inclusive of taxes)",
            },
            {
                "name": "Flexi Hybrid Term Loan",
                "description": "Interest-only EMIs for initial 24 months",
                "features": [
                    "Interest-only EMIs for first 24 months",
                    "Principal repayment starts from 25th month",
                    "Lower initial burden",
                    "Multiple withdrawals allowed",
                    "No part-prepayment charges",
                ],
                "charges": "Flexi facility charges: ₹1,999 to ₹12,999",
                "tenure": "Initial: 24 months, Subsequent: Up to 72 months",
            },
            {
                "name": "Flexi Term (Dropline) Loan",
                "description": "Fixed EMIs with flexible prepayment options",
                "features": [
                    "Fixed EMIs on withdrawn amount",
                    "Decreasing principal over time",
                    "Part payment options",
                    "No part-prepayment charges",
                    "Multiple withdrawals allowed",
                ],
                "charges": "Flexi facility charges: ₹1,999 to ₹12,999",
                "tenure": "12 to 96 months",
            },
        ],
    },
}
