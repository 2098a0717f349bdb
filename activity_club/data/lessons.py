from typing import Any

DEFAULT_SPACES = 5

SEED_LESSONS: list[dict[str, Any]] = [
    {
        "_id": "1",
        "subject": "Football Training",
        "location": "Sports Hall A",
        "price": 15,
        "description": "Improve ball control, passing, and teamwork fundamentals.",
        "image": "football.jpg",
    },
    {
        "_id": "2",
        "subject": "Tennis Coaching",
        "location": "Court 2",
        "price": 12,
        "description": "Serve technique, rally drills, and footwork for beginners.",
        "image": "tennis.jpg",
    },
    {
        "_id": "3",
        "subject": "Volleyball Practice",
        "location": "Gym Court 1",
        "price": 10,
        "description": "Learn set, spike, block, and coordinated team play.",
        "image": "volleyball.jpg",
    },
    {
        "_id": "4",
        "subject": "Basketball Skills",
        "location": "Sports Hall B",
        "price": 14,
        "description": "Dribbling, layups, defence stance, passing under pressure.",
        "image": "basketball.jpg",
    },
    {
        "_id": "5",
        "subject": "Swimming Basics",
        "location": "Pool Complex",
        "price": 18,
        "description": "Breathing, kicking form, safe movement in water.",
        "image": "Swimming Basics.jpg",
    },
    {
        "_id": "6",
        "subject": "Table Tennis Club",
        "location": "Activity Room 3",
        "price": 8,
        "description": "Spin control, serve receive, reflex training.",
        "image": "Table Tennis Club.jpg",
    },
    {
        "_id": "7",
        "subject": "Badminton Coaching",
        "location": "Sports Hall C",
        "price": 11,
        "description": "Clear, drop, smash drills. Footwork and court awareness.",
        "image": "badminton.jpg",
    },
    {
        "_id": "8",
        "subject": "Dance Fitness",
        "location": "Studio 1",
        "price": 9,
        "description": "High-energy music, rhythm, flexibility, confidence building.",
        "image": "Dance fitness.jpg",
    },
    {
        "_id": "9",
        "subject": "Yoga & Stretch",
        "location": "Studio 2",
        "price": 7,
        "description": "Balance, posture, calm breathing and guided recovery.",
        "image": "Yoga & Stretch.jpg",
    },
    {
        "_id": "10",
        "subject": "Coding for Kids",
        "location": "IT Lab",
        "price": 20,
        "description": "Beginner-friendly intro to logic, problem solving, and fun apps.",
        "image": "coding for Kids.jpg",
    },
]
