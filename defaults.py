"""
Bundled default content, in the same camelCase shape as stored documents.

Repositories fall back to these when their key is missing or unreadable.
"""

from datetime import datetime, timezone

from config import ADMIN_EMAIL

NAV_ITEMS = [
    {"id": "nav-home", "name": "Home", "href": "/", "order": 1, "isActive": True},
    {"id": "nav-projects", "name": "Projects", "href": "/projects", "order": 2, "isActive": True},
    {"id": "nav-services", "name": "Services", "href": "/services", "order": 3, "isActive": True},
    {"id": "nav-skills", "name": "Skills", "href": "/skills", "order": 4, "isActive": True},
    {"id": "nav-blog", "name": "Blog", "href": "/blog", "order": 5, "isActive": True},
    {"id": "nav-timeline", "name": "Timeline", "href": "/timeline", "order": 6, "isActive": True},
    {"id": "nav-contact", "name": "Contact", "href": "/contact", "order": 7, "isActive": True},
]

SITE_CONFIG = {"id": "site-config", "logoText": "Portfolio", "logoSize": 120, "useTextLogo": False}

SKILLS = [
    {"id": "skill-1", "name": "React", "icon": "react", "level": 5, "category": "development"},
    {"id": "skill-2", "name": "Three.js", "icon": "threejs", "level": 4, "category": "3d"},
    {"id": "skill-3", "name": "TypeScript", "icon": "typescript", "level": 5, "category": "development"},
    {"id": "skill-4", "name": "Tailwind CSS", "icon": "tailwind", "level": 4, "category": "development"},
    {"id": "skill-5", "name": "Blender", "icon": "blender", "level": 3, "category": "3d"},
    {"id": "skill-6", "name": "Figma", "icon": "figma", "level": 4, "category": "design"},
    {"id": "skill-7", "name": "TensorFlow", "icon": "tensorflow", "level": 3, "category": "ai"},
    {"id": "skill-8", "name": "Next.js", "icon": "nextjs", "level": 5, "category": "development"},
]

PROJECTS = [
    {
        "id": "project-1",
        "title": "Interactive 3D Visualization",
        "description": "A web-based 3D data visualization platform built with Three.js and React, "
                       "allowing users to explore complex datasets in an immersive environment.",
        "technologies": ["React", "Three.js", "TypeScript", "WebGL"],
        "imageUrl": "/images/project1.svg",
        "demoUrl": "https://example.com/demo1",
        "githubUrl": "https://github.com/example/project1",
        "featured": True,
    },
    {
        "id": "project-2",
        "title": "AI-Powered Design Assistant",
        "description": "A machine learning application that helps designers generate creative concepts "
                       "and iterate on designs using computer vision and natural language processing.",
        "technologies": ["Python", "TensorFlow", "React", "Flask"],
        "imageUrl": "/images/project2.svg",
        "demoUrl": "https://example.com/demo2",
        "githubUrl": "https://github.com/example/project2",
        "featured": True,
    },
    {
        "id": "project-3",
        "title": "Responsive E-Commerce Platform",
        "description": "A full-featured e-commerce solution with responsive design, animation effects, "
                       "and seamless payment integration.",
        "technologies": ["Next.js", "Tailwind CSS", "Stripe", "Framer Motion"],
        "imageUrl": "/images/project3.svg",
        "demoUrl": "https://example.com/demo3",
        "githubUrl": "https://github.com/example/project3",
        "featured": False,
    },
]

TESTIMONIALS = [
    {
        "id": "testimonial-1",
        "name": "Sarah Johnson",
        "role": "CTO",
        "company": "TechSolutions Inc.",
        "content": "Working with this developer was an absolute pleasure. They delivered our project on "
                   "time and exceeded our expectations with their attention to detail and creative solutions.",
        "avatarUrl": "/images/testimonials/avatar1.jpg",
        "rating": 5,
        "featured": True,
    },
    {
        "id": "testimonial-2",
        "name": "Michael Chen",
        "role": "Product Manager",
        "company": "InnovateCorp",
        "content": "I was impressed by the level of expertise and professionalism. Our web application not "
                   "only looks beautiful but performs exceptionally well.",
        "avatarUrl": "/images/testimonials/avatar2.jpg",
        "rating": 5,
        "featured": True,
    },
    {
        "id": "testimonial-3",
        "name": "Emily Rodriguez",
        "role": "Marketing Director",
        "company": "CreativeAgency",
        "content": "The attention to UX details and responsive design implementation was outstanding.",
        "avatarUrl": "/images/testimonials/avatar3.jpg",
        "rating": 4,
        "featured": False,
    },
]

_LOREM = ("Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed euismod, nisl nec ultricies "
          "lacinia, nisl nisl aliquet nisl, nec aliquet nisl nisl nec nisl.")

BLOG_POSTS = [
    {
        "id": "1",
        "title": "The Future of Web Development with AI",
        "excerpt": "Exploring how artificial intelligence is transforming the way we build and interact with websites.",
        "content": _LOREM,
        "imageUrl": "https://images.unsplash.com/photo-1620712943543-bcc4688e7485",
        "date": "2025-05-10",
        "author": "John Doe",
        "tags": ["AI", "Web Development", "Future Tech"],
        "featured": True,
    },
    {
        "id": "2",
        "title": "Designing for Accessibility: Best Practices",
        "excerpt": "Learn how to make your websites more accessible to users with disabilities.",
        "content": _LOREM,
        "imageUrl": "https://images.unsplash.com/photo-1586953208448-b95a79798f07",
        "date": "2025-05-05",
        "author": "Jane Smith",
        "tags": ["Accessibility", "UI/UX", "Design"],
        "featured": True,
    },
    {
        "id": "3",
        "title": "Getting Started with 3D Web Animations",
        "excerpt": "A beginner's guide to creating stunning 3D animations for your web projects.",
        "content": _LOREM,
        "imageUrl": "https://images.unsplash.com/photo-1558655146-d09347e92766",
        "date": "2025-04-28",
        "author": "Michael Johnson",
        "tags": ["3D", "Animation", "WebGL"],
        "featured": False,
    },
    {
        "id": "4",
        "title": "The Rise of Serverless Architecture",
        "excerpt": "Why serverless is becoming the preferred choice for modern web applications.",
        "content": _LOREM,
        "imageUrl": "https://images.unsplash.com/photo-1558494949-ef010cbdcc31",
        "date": "2025-04-20",
        "author": "Sarah Williams",
        "tags": ["Serverless", "Architecture", "Cloud"],
        "featured": False,
    },
]

TIMELINE = [
    {
        "id": "timeline-1",
        "date": "2025",
        "title": "Senior Creative Developer",
        "description": "Leading the development of interactive web experiences and 3D visualizations for major clients.",
        "tags": ["Leadership", "Three.js", "WebGL"],
        "link": {"url": "https://example.com/company1", "text": "View Company"},
    },
    {
        "id": "timeline-2",
        "date": "2023 - 2025",
        "title": "UI/UX Designer & Developer",
        "description": "Created responsive interfaces and interactive prototypes for web and mobile applications.",
        "tags": ["UI/UX", "React", "Figma"],
    },
    {
        "id": "timeline-3",
        "date": "2022 - 2023",
        "title": "3D Artist & Frontend Developer",
        "description": "Developed 3D web experiences and animations for digital marketing campaigns.",
        "tags": ["3D Modeling", "Animation", "Frontend"],
    },
    {
        "id": "timeline-4",
        "date": "2021",
        "title": "Interactive Media Design Degree",
        "description": "Graduated with honors, specializing in digital interfaces and interactive storytelling.",
        "tags": ["Education", "Design", "Interactive Media"],
    },
]

SERVICES = [
    {"id": "1", "title": "Web Development", "icon": "code", "featured": True,
     "description": "Custom web applications built with modern frameworks like React, Next.js, and Node.js."},
    {"id": "2", "title": "UI/UX Design", "icon": "palette", "featured": True,
     "description": "User-centered design with a focus on intuitive interfaces and seamless user experiences."},
    {"id": "3", "title": "3D Modeling & Animation", "icon": "cube", "featured": True,
     "description": "Custom 3D models and animations for web, games, and interactive experiences."},
    {"id": "4", "title": "Mobile App Development", "icon": "smartphone", "featured": False,
     "description": "Native and cross-platform mobile applications for iOS and Android."},
    {"id": "5", "title": "SEO Optimization", "icon": "search", "featured": False,
     "description": "Improve your website's visibility and ranking in search engine results."},
    {"id": "6", "title": "Content Creation", "icon": "edit", "featured": False,
     "description": "High-quality content creation for blogs, social media, and marketing materials."},
]

FOOTER_CONFIG = {
    "id": "footer-config",
    "description": "Creative developer and designer specializing in immersive digital experiences, "
                   "3D web development, and AI-powered applications.",
    "copyrightText": "© {year} Portfolio. All rights reserved.",
    "legalTitle": "Legal",
    "socialLinks": [
        {"id": "social-linkedin", "platform": "LinkedIn", "url": "#", "ariaLabel": "LinkedIn", "order": 1,
         "isActive": True, "useLocalSvg": True, "localSvgPath": "/images/social-icons/linkedin.svg"},
        {"id": "social-github", "platform": "GitHub", "url": "#", "ariaLabel": "GitHub", "order": 2,
         "isActive": True, "useLocalSvg": True, "localSvgPath": "/images/social-icons/github.svg"},
        {"id": "social-twitter", "platform": "Twitter", "url": "#", "ariaLabel": "Twitter", "order": 3,
         "isActive": True, "useLocalSvg": True, "localSvgPath": "/images/social-icons/twitter.svg"},
        {"id": "social-dribbble", "platform": "Dribbble", "url": "#", "ariaLabel": "Dribbble", "order": 4,
         "isActive": True, "useLocalSvg": True, "localSvgPath": "/images/social-icons/dribbble.svg"},
    ],
    "quickLinks": [
        {"id": "quick-home", "name": "Home", "href": "/", "order": 1, "isActive": True},
        {"id": "quick-projects", "name": "Projects", "href": "/projects", "order": 2, "isActive": True},
        {"id": "quick-skills", "name": "Skills", "href": "/skills", "order": 3, "isActive": True},
        {"id": "quick-timeline", "name": "Timeline", "href": "/timeline", "order": 4, "isActive": True},
        {"id": "quick-contact", "name": "Contact", "href": "/contact", "order": 5, "isActive": True},
    ],
    "contactInfo": {"email": "contact@example.com", "location": "San Francisco, California"},
    "legalLinks": [
        {"id": "legal-privacy", "name": "Privacy Policy", "href": "/privacy-policy", "order": 1, "isActive": True},
        {"id": "legal-terms", "name": "Terms of Service", "href": "/terms-of-service", "order": 2, "isActive": True},
    ],
}

HERO_SETTINGS = {
    "title": "Creative",
    "highlightedText1": "Developer",
    "highlightedText2": "Designer",
    "description": "Crafting immersive digital experiences through 2D/3D design, animation, and "
                   "cutting-edge web development with AI-powered features.",
    "projectsButtonText": "View Projects",
    "projectsButtonLink": "#projects",
    "contactButtonText": "Contact Me",
    "contactButtonLink": "#contact",
}

MODEL_SETTINGS = {"sizeMultiplier": 1.0}

LEGAL_PAGES = {"pages": []}

HIGHLIGHTS_CONFIG = {
    "title": "Portfolio Highlights",
    "description": "A snapshot of my professional journey and creative output across different domains",
    "stats": [
        {"id": "1", "icon": "computer", "value": 48, "label": "Web Projects", "active": True},
        {"id": "2", "icon": "link", "value": 65, "label": "Logo Designs", "active": True},
        {"id": "3", "icon": "3d_rotation", "value": 32, "label": "3D Graphics", "active": True},
        {"id": "4", "icon": "calendar_today", "value": 8, "label": "Years of Development", "active": True},
        {"id": "5", "icon": "code", "value": 120, "label": "GitHub Repositories", "active": False},
        {"id": "6", "icon": "people", "value": 15, "label": "Team Collaborations", "active": False},
    ],
}

SECTION_SETTINGS = {
    "skills": {
        "title": "Skills Overview",
        "description": "A comprehensive breakdown of my technical and creative abilities across design, "
                       "development, and specialized tools.",
    },
    "projects": {
        "title": "Featured Projects",
        "description": "A selection of my most recent and notable work across various domains and technologies.",
    },
    "about": {
        "title": "About Me",
        "description": "Learn more about my background, experience, and what drives me as a creative developer.",
    },
    "contact": {
        "title": "Get In Touch",
        "description": "Interested in working together? Reach out through any of these channels.",
    },
}

CONTACT_SETTINGS = {
    "id": "contact-settings",
    "title": "Get in Touch",
    "subtitle": "Contact Me",
    "description": "Have a project in mind or want to discuss a potential collaboration? Feel free to reach "
                   "out using the form below or through any of my social channels.",
    "email": "hello@example.com",
    "phone": "+1 (555) 123-4567",
    "address": "123 Creative St, Design City, 10001",
    "mapEnabled": True,
    "latitude": 40.7128,
    "longitude": -74.0060,
    "formEnabled": True,
    "socialLinks": [
        {"platform": "Twitter", "url": "https://twitter.com", "icon": "twitter"},
        {"platform": "LinkedIn", "url": "https://linkedin.com", "icon": "linkedin"},
        {"platform": "GitHub", "url": "https://github.com", "icon": "github"},
    ],
}

LOGOS = [
    {"id": "frontend-default", "name": "Default Frontend Logo", "type": "frontend",
     "imageUrl": "/images/logos/frontend-logo.svg", "active": True, "size": 120, "useText": False,
     "text": "Portfolio"},
    {"id": "backend-default", "name": "Default Backend Logo", "type": "backend",
     "imageUrl": "/images/logos/backend-logo.svg", "active": True, "size": 120, "useText": False,
     "text": "Portfolio Admin"},
]

PAGE_CONTENTS = {}

_NOW = datetime.now(timezone.utc).isoformat()

USERS = [
    {
        "id": "admin-user-default",
        "name": "Admin User",
        "email": ADMIN_EMAIL,
        "role": "admin",
        "createdAt": _NOW,
        "updatedAt": _NOW,
    }
]
