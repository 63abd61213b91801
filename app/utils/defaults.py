"""
Default page content.

Used when a singleton document is first created and by scripts/seed_database.py.
Keys are stored as-is (camelCase), matching the documents served to the frontend.
"""

DEFAULT_HERO = {
    "greeting": "Hi I am",
    "name": "Your Name",
    "designation": "Full Stack Developer & UI/UX Designer",
    "description": (
        "With a passion for crafting clean, intuitive, and high-performing digital experiences, "
        "I develop both web and mobile applications that merge design and functionality seamlessly."
    ),
    "linkedinUrl": "https://www.linkedin.com/",
    "githubUrl": "https://github.com/",
    "image": "",
    "phone": "",
    "email": "",
    "address": "",
}

DEFAULT_ABOUT = {
    "description": (
        "Passionate Full Stack Developer and UI/UX Designer with a creative approach to crafting "
        "intuitive and engaging user experiences."
    ),
    "skills": [
        {"name": "React.js", "progress": 90, "color": "bg-blue-600"},
        {"name": "Node.js", "progress": 85, "color": "bg-green-600"},
        {"name": "MongoDB", "progress": 80, "color": "bg-green-500"},
        {"name": "JavaScript", "progress": 88, "color": "bg-yellow-500"},
        {"name": "UI/UX Design", "progress": 85, "color": "bg-purple-600"},
        {"name": "Mobile Development", "progress": 75, "color": "bg-indigo-600"},
    ],
    "highlights": [
        {"value": "5+", "label": "Years of Experience", "detail": "Building digital products"},
        {"value": "50+", "label": "Projects Delivered", "detail": "Web & mobile solutions"},
        {"value": "20+", "label": "Technologies", "detail": "Across the stack"},
        {"value": "100%", "label": "Client Satisfaction", "detail": "Happy customers"},
    ],
    "mission": (
        "Crafting meaningful products that balance stunning visuals with dependable performance."
    ),
    "image": "",
}


def _process(*steps):
    return [
        {"step": f"{i:02d}", "title": title, "description": description}
        for i, (title, description) in enumerate(steps, start=1)
    ]


DEFAULT_SERVICES = {
    "sectionTitle": "Services",
    "sectionDescription": (
        "Comprehensive development solutions tailored to your business needs. From mobile apps "
        "to web platforms and seamless API integrations."
    ),
    "services": [
        {
            "slug": "app-development",
            "title": "App Development",
            "icon": "Smartphone",
            "shortDescription": (
                "Building native and cross-platform mobile applications for iOS and Android."
            ),
            "fullDescription": (
                "I develop mobile applications that deliver exceptional user experiences across "
                "iOS and Android, from concept to app store submission."
            ),
            "features": [
                "iOS & Android Development",
                "React Native & Flutter",
                "Native App Development",
                "App Store Deployment",
                "Performance Optimization",
                "Backend Integration",
            ],
            "process": _process(
                ("Requirements Analysis", "Understanding your business needs and defining app features."),
                ("Architecture & Planning", "Designing app architecture and creating a development roadmap."),
                ("Development & Testing", "Building the app with clean code and comprehensive testing."),
                ("Quality Assurance", "Testing across devices and platforms."),
                ("Deployment & Support", "App store submission and ongoing maintenance."),
            ),
            "color": "blue",
            "order": 0,
        },
        {
            "slug": "web-development",
            "title": "Web Development",
            "icon": "Monitor",
            "shortDescription": (
                "Creating responsive, scalable web applications and websites using modern technologies."
            ),
            "fullDescription": (
                "I build modern, responsive web applications covering both frontend and backend, "
                "optimized for performance, SEO and user engagement."
            ),
            "features": [
                "Responsive Web Design",
                "Frontend & Backend Development",
                "Modern Frameworks (React, Vue, Angular)",
                "Database Integration",
                "API Development",
                "Performance Optimization",
            ],
            "process": _process(
                ("Planning & Design", "Defining project requirements and creating wireframes and designs."),
                ("Frontend Development", "Building responsive user interfaces with modern frameworks."),
                ("Backend Development", "Developing server-side logic, APIs, and database integration."),
                ("Testing & Optimization", "Comprehensive testing and performance optimization."),
                ("Deployment & Maintenance", "Deploying to production and providing ongoing support."),
            ),
            "color": "blue",
            "order": 1,
        },
        {
            "slug": "api-integration",
            "title": "API Integration",
            "icon": "Code",
            "shortDescription": (
                "Connecting your applications with third-party services and APIs."
            ),
            "fullDescription": (
                "RESTful and GraphQL API development, payment gateways, webhooks and real-time "
                "data synchronization that work with your existing systems."
            ),
            "features": [
                "RESTful API Development",
                "Third-Party API Integration",
                "Payment Gateway Integration",
                "GraphQL Implementation",
                "Webhook Setup",
                "API Documentation",
            ],
            "process": _process(
                ("API Analysis", "Analyzing requirements and identifying integration points."),
                ("Integration Planning", "Designing integration architecture and data flow."),
                ("Development & Testing", "Building and testing API integrations thoroughly."),
                ("Security & Optimization", "Implementing security measures and optimizing performance."),
                ("Documentation & Support", "Providing documentation and ongoing support."),
            ),
            "color": "blue",
            "order": 2,
        },
    ],
}

DEFAULT_EDUCATION_DESCRIPTION = (
    "All my life I have been driven by my strong belief that education is important. "
    "I try to learn something new every single day."
)

DEFAULT_EDUCATION = {
    "sectionTitle": "Education",
    "sectionDescription": DEFAULT_EDUCATION_DESCRIPTION,
    "educationItems": [
        {
            "degree": "Bachelor of Engineering (B.E.)",
            "collegeName": "Your University",
            "institution": "Computer Science & Engineering",
            "year": "2018 - 2022",
            "percentage": "8.5 CGPA",
            "description": "Specialized in software development, database management, and computer networks.",
            "order": 0,
        },
        {
            "degree": "Higher Secondary Education",
            "collegeName": "State Board",
            "institution": "Science Stream",
            "year": "2016 - 2018",
            "percentage": "85%",
            "description": "Completed with focus on Mathematics, Physics, and Chemistry.",
            "order": 1,
        },
    ],
}

DEFAULT_PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "description": (
            "A full-featured e-commerce platform with user authentication, product management, "
            "shopping cart, and payment integration."
        ),
        "category": "Website Design",
        "image": "https://via.placeholder.com/800x600?text=E-Commerce+Platform",
        "technologies": ["React.js", "Node.js", "MongoDB", "Express", "Stripe API"],
        "liveUrl": "",
        "githubUrl": "",
        "featured": True,
    },
    {
        "title": "Task Management App",
        "description": (
            "A task management application with real-time collaboration, deadlines and progress tracking."
        ),
        "category": "App Design",
        "image": "https://via.placeholder.com/800x600?text=Task+Management+App",
        "technologies": ["React Native", "Firebase", "Redux", "TypeScript"],
        "liveUrl": "",
        "githubUrl": "",
        "featured": True,
    },
    {
        "title": "Portfolio Website",
        "description": "A responsive portfolio website showcasing projects, skills, and experience.",
        "category": "Website Design",
        "image": "https://via.placeholder.com/800x600?text=Portfolio+Website",
        "technologies": ["React.js", "Tailwind CSS", "Framer Motion", "Node.js"],
        "liveUrl": "",
        "githubUrl": "",
        "featured": False,
    },
    {
        "title": "Fitness Tracking App",
        "description": "A mobile application for tracking workouts, monitoring progress, and setting fitness goals.",
        "category": "App Design",
        "image": "https://via.placeholder.com/800x600?text=Fitness+Tracking+App",
        "technologies": ["Flutter", "Firebase", "Health API", "Dart"],
        "liveUrl": "",
        "githubUrl": "",
        "featured": True,
    },
]
