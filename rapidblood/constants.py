"""
Static reference data for RapidBlood.
"""

BLOOD_GROUPS = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']

LOCATIONS = [
    'Tirupati', 'Vijayawada', 'Guntur', 'Nellore', 'Kurnool',
    'Visakhapatnam', 'Rajahmundry', 'Anantapur', 'Kadapa'
]

# Opening stock shown on the blood bank dashboard
DEFAULT_INVENTORY = {
    'A+': 12, 'A-': 4, 'B+': 18, 'B-': 2, 'AB+': 8, 'AB-': 1, 'O+': 25, 'O-': 5
}

LOGIN_PATH = '/login'
HOME_PATH = '/'
