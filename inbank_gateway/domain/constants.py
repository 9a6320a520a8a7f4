"""Business constants for the loan decision engine"""

# Loan amount bounds in euros
MINIMUM_LOAN_AMOUNT = 2000
MAXIMUM_LOAN_AMOUNT = 10000
LOAN_AMOUNT_STEP = 100

# Loan period bounds in months
MINIMUM_LOAN_PERIOD = 12
MAXIMUM_LOAN_PERIOD = 60

# Credit modifiers per segment
SEGMENT_1_CREDIT_MODIFIER = 100
SEGMENT_2_CREDIT_MODIFIER = 300
SEGMENT_3_CREDIT_MODIFIER = 1000

# A credit score at or above this value is approvable
APPROVAL_THRESHOLD = 1.0

ADULT_AGE = 18

# Expected lifetime in years
EXPECTED_LIFETIME_ESTONIA = 78
EXPECTED_LIFETIME_LATVIA = 75
EXPECTED_LIFETIME_LITHUANIA = 76
