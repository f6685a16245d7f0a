"""
Static page content (hero, about, skills, projects, contact, footer).

Plain lists of dicts, rendered in order by templates/index.html.
Edit here to change what the site shows; nothing is validated.
"""

from __future__ import annotations

import copy

EMAIL = "yashm15082005@gmail.com"
GITHUB_URL = "https://github.com/yash936936"
LINKEDIN_URL = "https://www.linkedin.com/in/yashmalik-/"
RESUME_URL = "https://drive.google.com/file/d/1u2HozU5FuxlfMEROVlIrqoqHbbzteDxv/view?usp=sharing"

NAV_ITEMS = [
    {"name": "Home", "href": "#home", "id": "home"},
    {"name": "About", "href": "#about", "id": "about"},
    {"name": "Skills", "href": "#skills", "id": "skills"},
    {"name": "Projects", "href": "#projects", "id": "projects"},
    {"name": "Contact", "href": "#contact", "id": "contact"},
]

HERO = {
    "initials": "YM",
    "badge": "👋 Welcome to My Portfolio",
    "name": "Yash Malik",
    "title": "MERN Stack Developer & AI Enthusiast",
    "tagline": (
        "Delivering scalable full-stack systems powered by AI, clean design, "
        "and data-driven execution."
    ),
    "actions": [
        {"label": "Explore My Work", "href": "#projects", "primary": True},
        {"label": "Get In Touch", "href": "#contact", "primary": False},
    ],
}

ABOUT = {
    "eyebrow": "Get to know me",
    "heading": "About Me",
    "paragraphs": [
        "I'm a passionate MERN Stack Developer & AI Enthusiast dedicated to "
        "creating impactful digital solutions that merge clean design with robust functionality.",
        "My journey in tech is driven by curiosity and a commitment to continuous learning. "
        "I thrive on solving complex problems and bringing innovative ideas to life through code.",
    ],
    "highlights_heading": "What I Bring",
    "highlights": [
        {"icon": "💻", "title": "Full-Stack Expertise", "desc": "End-to-end development with MERN stack"},
        {"icon": "🎨", "title": "Design Sensibility", "desc": "Creating intuitive, beautiful user experiences"},
        {"icon": "🚀", "title": "Performance Focus", "desc": "Building scalable, optimized solutions"},
        {"icon": "🤝", "title": "Team Collaboration", "desc": "Effective communication and teamwork"},
    ],
}

SKILL_CATEGORIES = [
    {
        "title": "Frontend",
        "skills": ["React", "JavaScript", "HTML5", "CSS3", "Tailwind CSS", "Bootstrap"],
        "gradient": "blue-cyan",
        "icon": "🎨",
    },
    {
        "title": "Backend",
        "skills": ["Node.js", "Express", "MongoDB", "MySQL", "Python"],
        "gradient": "green-emerald",
        "icon": "⚙️",
    },
    {
        "title": "Tools & Deployment",
        "skills": ["Git & GitHub", "Render", "Vercel"],
        "gradient": "purple-pink",
        "icon": "🚀",
    },
    {
        "title": "Soft Skills",
        "skills": ["Communication", "Problem-Solving", "Teamwork", "Research", "Management"],
        "gradient": "orange-red",
        "icon": "🎯",
    },
]

PROJECTS = [
    {
        "title": "Consultancy Website",
        "description": "Full MERN stack website with Admin Panel and Login system.",
        "tech": ["React", "Bootstrap", "JavaScript"],
        "github_url": "https://github.com/yash936936/Consultancy_Website",
        "gradient": "blue-cyan",
    },
    {
        "title": "Chatbot Web App",
        "description": "Web-based chatbot using REST APIs and image input.",
        "tech": ["HTML", "CSS", "JavaScript", "APIs"],
        "github_url": "https://github.com/yash936936/ChatBot",
        "gradient": "purple-pink",
    },
    {
        "title": "E-Commerce Platform",
        "description": "Complete shopping system with auth, product management, and live cart.",
        "tech": ["React", "Express", "MongoDB"],
        "github_url": "https://github.com/yash936936/MERN_ECOMMERCEE",
        "gradient": "green-emerald",
    },
    {
        "title": "Chat Application",
        "description": "Real-time messaging app using Socket.io and Tailwind CSS.",
        "tech": ["React", "Socket.io", "Tailwind CSS"],
        "github_url": "https://github.com/yash936936/Chat_APP",
        "gradient": "orange-red",
    },
    {
        "title": "Trend Analysis",
        "description": "EDA project analyzing consumer shopping patterns.",
        "tech": ["Python", "Pandas", "Matplotlib"],
        "github_url": "https://github.com/yash936936/identifying-shopping-trends-using-data-analysis",
        "gradient": "indigo-purple",
    },
    {
        "title": "Stock Price Prediction",
        "description": "ML model forecasting stock movements using historical data.",
        "tech": ["Python", "TensorFlow"],
        "github_url": "https://github.com/yash936936/Stock-Price-Prediction-Using-Time-Series-Regression",
        "gradient": "pink-rose",
    },
]

CONTACT = {
    "eyebrow": "Let's Connect",
    "heading": "Get In Touch",
    "intro": (
        "I'm currently seeking internship opportunities to contribute to "
        "innovative projects and grow as a developer"
    ),
    "links": [
        {"icon": "email", "title": "Email", "value": EMAIL,
         "href": f"mailto:{EMAIL}", "gradient": "red-orange"},
        {"icon": "linkedin", "title": "LinkedIn", "value": "Connect with me",
         "href": LINKEDIN_URL, "gradient": "blue-blue"},
        {"icon": "github", "title": "GitHub", "value": "View my repositories",
         "href": GITHUB_URL, "gradient": "gray-gray"},
        {"icon": "resume", "title": "Resume", "value": "Download CV",
         "href": RESUME_URL, "gradient": "purple-pink"},
    ],
    "cta": {
        "heading": "Ready to Start a Project?",
        "text": "Looking for internship opportunities",
        "label": "Let's Talk",
        "href": f"mailto:{EMAIL}",
    },
}

FOOTER = {
    "copyright": "© 2025 Yash Malik. Crafted with passion and code.",
    "links": [
        {"label": "GitHub", "href": GITHUB_URL},
        {"label": "LinkedIn", "href": LINKEDIN_URL},
        {"label": "Email", "href": f"mailto:{EMAIL}"},
    ],
}


def load_content() -> dict:
    """Fresh copy of every collection, keyed the way the template expects."""
    return copy.deepcopy({
        "nav_items": NAV_ITEMS,
        "hero": HERO,
        "about": ABOUT,
        "skill_categories": SKILL_CATEGORIES,
        "projects": PROJECTS,
        "contact": CONTACT,
        "footer": FOOTER,
    })


def is_external(href: str | None) -> bool:
    """Off-site web links (opened in a new tab)."""
    return bool(href) and href.startswith(("http://", "https://"))
