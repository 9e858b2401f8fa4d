# loan_portal/service_catalog.py

"""
Default catalog of loan products offered through the portal.
Used to seed an empty `services` collection; once seeded the
collection is the source of truth and this list is not consulted.
"""

SERVICE_CATALOG = [
    {
        "type": "home-loan",
        "code": "HL",
        "description": "Finance the purchase, construction or renovation of your home.",
        "imgUrl": "/images/services/home-loan.png",
        "detail": [
            "Loan amounts up to 50,00,000",
            "Tenure up to 240 months",
            "Part prepayment allowed without charges",
        ],
    },
    {
        "type": "personal-loan",
        "code": "PL",
        "description": "Unsecured loan for personal and family needs.",
        "imgUrl": "/images/services/personal-loan.png",
        "detail": [
            "No collateral required",
            "Tenure from 6 to 60 months",
            "Disbursal within 48 hours of approval",
        ],
    },
    {
        "type": "business-loan",
        "code": "BL",
        "description": "Working capital and expansion loans for small businesses.",
        "imgUrl": "/images/services/business-loan.png",
        "detail": [
            "Loan amounts up to 10,00,000",
            "Flexible monthly repayment",
            "Minimal documentation for existing members",
        ],
    },
    {
        "type": "education-loan",
        "code": "EL",
        "description": "Cover tuition and living expenses for higher studies.",
        "imgUrl": "/images/services/education-loan.png",
        "detail": [
            "Repayment starts after course completion",
            "Covers tuition, books and hostel fees",
            "Co-applicant required",
        ],
    },
    {
        "type": "vehicle-loan",
        "code": "VL",
        "description": "Loans for two-wheelers and commercial vehicles.",
        "imgUrl": "/images/services/vehicle-loan.png",
        "detail": [
            "Up to 90% of on-road price",
            "Tenure up to 84 months",
            "Vehicle hypothecated until closure",
        ],
    },
    {
        "type": "gold-loan",
        "code": "GL",
        "description": "Short-term loans against gold ornaments.",
        "detail": [
            "Same-day disbursal",
            "Tenure up to 12 months",
            "Ornaments kept in insured vaults",
        ],
    },
]
