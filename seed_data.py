"""Default records inserted when a collection's CSV file is empty or absent."""

SAMPLE_DONORS = [
    {
        'fullName': 'Sharath Bandaari',
        'age': 28,
        'bloodGroup': 'O+',
        'city': 'New York',
        'pincode': '10001',
        'contactNumber': '123-456-7890',
        'lastDonationDate': '2022-12-15',
        'healthCondition': 'excellent',
        'isAvailable': True,
        'isAnonymous': False,
        'donationCount': 5
    },
    {
        'fullName': 'Charan Reddy',
        'age': 32,
        'bloodGroup': 'A-',
        'city': 'Los Angeles',
        'pincode': '90001',
        'contactNumber': '213-555-1234',
        'lastDonationDate': '2023-03-10',
        'healthCondition': 'good',
        'isAvailable': True,
        'isAnonymous': False,
        'donationCount': 3
    },
    {
        'fullName': 'Nandini',
        'age': 45,
        'bloodGroup': 'B+',
        'city': 'Chicago',
        'pincode': '60601',
        'contactNumber': '312-555-6789',
        'lastDonationDate': '2023-05-22',
        'healthCondition': 'good',
        'isAvailable': False,
        'isAnonymous': False,
        'donationCount': 12
    },
    {
        'fullName': 'Praveena',
        'age': 29,
        'bloodGroup': 'AB+',
        'city': 'Houston',
        'pincode': '77001',
        'contactNumber': '832-555-4321',
        'lastDonationDate': '2023-02-05',
        'healthCondition': 'excellent',
        'isAvailable': True,
        'isAnonymous': True,
        'donationCount': 2
    },
    {
        'fullName': 'David Reddy',
        'age': 38,
        'bloodGroup': 'O-',
        'city': 'Phoenix',
        'pincode': '85001',
        'contactNumber': '602-555-8765',
        'lastDonationDate': '2022-10-30',
        'healthCondition': 'good',
        'isAvailable': True,
        'isAnonymous': False,
        'donationCount': 8
    },
    {
        'fullName': 'Virat Kohli',
        'age': 26,
        'bloodGroup': 'A+',
        'city': 'Philadelphia',
        'pincode': '19019',
        'contactNumber': '215-555-2468',
        'lastDonationDate': '2023-06-12',
        'healthCondition': 'excellent',
        'isAvailable': True,
        'isAnonymous': False,
        'donationCount': 4
    },
    {
        'fullName': 'Krish Gupta',
        'age': 41,
        'bloodGroup': 'B-',
        'city': 'San Antonio',
        'pincode': '78201',
        'contactNumber': '210-555-1357',
        'lastDonationDate': '2022-08-18',
        'healthCondition': 'good',
        'isAvailable': False,
        'isAnonymous': False,
        'donationCount': 6
    },
    {
        'fullName': 'Eshanth',
        'age': 33,
        'bloodGroup': 'AB-',
        'city': 'San Diego',
        'pincode': '92101',
        'contactNumber': '619-555-3690',
        'lastDonationDate': None,
        'healthCondition': 'excellent',
        'isAvailable': True,
        'isAnonymous': True,
        'donationCount': 0
    },
    {
        'fullName': 'Daniel Clark',
        'age': 35,
        'bloodGroup': 'O+',
        'city': 'Dallas',
        'pincode': '75201',
        'contactNumber': '469-555-7531',
        'lastDonationDate': '2023-04-25',
        'healthCondition': 'good',
        'isAvailable': True,
        'isAnonymous': False,
        'donationCount': 7
    },
    {
        'fullName': 'Arun Yadav',
        'age': 27,
        'bloodGroup': 'A+',
        'city': 'San Jose',
        'pincode': '95101',
        'contactNumber': '408-555-8642',
        'lastDonationDate': '2023-01-08',
        'healthCondition': 'excellent',
        'isAvailable': True,
        'isAnonymous': False,
        'donationCount': 1
    }
]

SAMPLE_BLOOD_REQUESTS = [
    {
        'patientName': 'Sharath Bandaari',
        'bloodGroup': 'A+',
        'hospitalName': 'Apollo Hospital',
        'hospitalLocation': 'Jubilee Hills, Hyderabad',
        'contactNumber': '9876543210',
        'urgency': 'high',
        'additionalInfo': 'Need blood for surgery scheduled for tomorrow morning'
    }
]

SAMPLE_EMERGENCY_ALERTS = [
    {
        'message': 'URGENT NEED: O-negative blood required at City Hospital. Contact: +1-234-567-8901',
        'contactNumber': '+1-234-567-8901',
        'isActive': True
    }
]

SAMPLE_BLOOD_FACTS = [
    {
        'title': 'Blood Types Compatibility',
        'content': 'O- is the universal donor and AB+ is the universal recipient. Learn about other compatibilities.',
        'icon': 'tint',
        'link': '/blood-facts/compatibility'
    },
    {
        'title': 'Donation Intervals',
        'content': 'Most donors can give blood every 56 days. Platelet donors can donate more frequently.',
        'icon': 'calendar-alt',
        'link': '/blood-facts/intervals'
    },
    {
        'title': 'Health Benefits',
        'content': 'Regular blood donation can reduce the risk of heart disease and help in maintaining iron levels.',
        'icon': 'heartbeat',
        'link': '/blood-facts/benefits'
    },
    {
        'title': 'Eligibility Requirements',
        'content': 'Learn about the age, weight, and health requirements for donating blood.',
        'icon': 'question-circle',
        'link': '/blood-facts/eligibility'
    },
    {
        'title': 'Donation Process',
        'content': 'What to expect during a blood donation session, from registration to recovery.',
        'icon': 'procedures',
        'link': '/blood-facts/process'
    },
    {
        'title': 'Blood Usage Statistics',
        'content': 'Learn how donated blood is used and why continued donations are crucial.',
        'icon': 'chart-pie',
        'link': '/blood-facts/statistics'
    }
]
