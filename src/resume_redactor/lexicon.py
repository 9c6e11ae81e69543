"""Word lists for the name heuristics.

Kept as data so they can be tested, extended from config, or swapped out
for another locale without touching the detection passes.
"""

from __future__ import annotations

# Whole phrases that look like "Firstname Lastname" but are resume headings
# or job/skill phrases.  Compared case-insensitively.
SECTION_HEADERS: frozenset[str] = frozenset({
    "Work Experience", "Professional Experience", "Work History", "Employment History",
    "Education", "Academic Background", "Educational Background",
    "Skills", "Technical Skills", "Core Skills", "Key Skills", "Core Competencies",
    "Projects", "Key Projects", "Major Projects", "Personal Projects", "Client Projects",
    "Source Projects",
    "Certifications", "Certificates", "Professional Certifications",
    "Awards", "Achievements", "Honors", "Accomplishments",
    "References", "Professional References",
    "Summary", "Professional Summary", "Career Summary", "Executive Summary",
    "Objective", "Career Objective", "Professional Objective",
    "Profile", "Professional Profile", "Personal Profile",
    "Languages", "Language Skills",
    "Interests", "Personal Interests", "Hobbies",
    "Publications", "Research Publications",
    "Contact Information", "Personal Information",
    "Tools", "Technologies", "Frameworks",
    "Programming Languages", "Software Skills",
    "Current Year", "Batch",
    "Robotic Process", "Process Automation", "Machine Learning", "Data Science",
    "Software Engineer", "Software Development", "Web Development",
    "Project Manager", "Business Analyst", "Quality Assurance",
    "Database Administrator", "System Administrator", "Network Engineer",
    "Cloud Computing", "Artificial Intelligence", "Deep Learning",
    "Version Control", "Source Code", "Code Review",
    "Unit Testing", "Integration Testing", "User Interface",
    "User Experience", "Product Management", "Agile Development",
})

# Upper-case technical and resume vocabulary.  A leading word equal to,
# containing, or contained in one of these is not a name.
PARTIAL_WORDS: frozenset[str] = frozenset({
    # technology and systems
    "GENERATOR", "AUTOMATION", "ROBOTIC", "PROCESS", "MACHINE", "SYSTEM",
    "NETWORK", "DATABASE", "SOFTWARE", "HARDWARE", "FRAMEWORK", "PLATFORM",
    "APPLICATION", "SOLUTION", "SERVICE", "PRODUCT", "PROJECT", "PROGRAM",
    "MODULE", "COMPONENT", "INTERFACE", "ARCHITECTURE", "INFRASTRUCTURE",
    "TECHNOLOGY", "TECHNOLOGIES", "DIGITAL", "CLOUD", "SERVER", "CLIENT",
    "BACKEND", "FRONTEND", "FULLSTACK", "MOBILE", "DESKTOP", "WEB",
    "API", "REST", "GRAPHQL", "MICROSERVICE", "CONTAINER", "DOCKER",
    "KUBERNETES", "JENKINS", "PIPELINE", "DEPLOYMENT", "INTEGRATION",
    # job titles and roles
    "DEVELOPMENT", "ENGINEER", "ANALYST", "MANAGER", "ADMINISTRATOR",
    "DEVELOPER", "DESIGNER", "ARCHITECT", "CONSULTANT", "SPECIALIST",
    "COORDINATOR", "EXECUTIVE", "DIRECTOR", "OFFICER", "LEAD", "HEAD",
    "ASSOCIATE", "ASSISTANT", "INTERN", "TRAINEE", "SENIOR", "JUNIOR",
    "PRINCIPAL", "STAFF", "TEAM", "MEMBER", "CONTRIBUTOR", "OWNER",
    # skills
    "PROGRAMMING", "CODING", "SCRIPTING", "TESTING", "DEBUGGING",
    "OPTIMIZATION", "PERFORMANCE", "SECURITY", "ENCRYPTION", "AUTHENTICATION",
    "AUTHORIZATION", "MONITORING", "LOGGING", "ANALYTICS", "REPORTING",
    "DOCUMENTATION", "MAINTENANCE", "SUPPORT", "TROUBLESHOOTING",
    "CONFIGURATION", "INSTALLATION", "MIGRATION", "UPGRADE", "PATCH",
    # development concepts
    "ALGORITHM", "STRUCTURE", "PATTERN", "METHODOLOGY", "PRACTICE",
    "PRINCIPLE", "CONCEPT", "MODEL", "SCHEMA", "PROTOCOL", "STANDARD",
    "SPECIFICATION", "REQUIREMENT", "FEATURE", "FUNCTION", "METHOD",
    "CLASS", "OBJECT", "VARIABLE", "CONSTANT", "PARAMETER", "ARGUMENT",
    # tools and platforms
    "GITHUB", "GITLAB", "BITBUCKET", "JIRA", "CONFLUENCE", "SLACK",
    "VISUAL", "STUDIO", "ECLIPSE", "INTELLIJ", "PYCHARM", "VSCODE",
    "POSTMAN", "SWAGGER", "ANSIBLE", "TERRAFORM", "VAGRANT",
    # languages and frameworks
    "PYTHON", "JAVASCRIPT", "TYPESCRIPT", "REACT", "ANGULAR", "VUE",
    "NODE", "EXPRESS", "SPRING", "DJANGO", "FLASK", "LARAVEL",
    "DOTNET", "CSHARP", "JAVA", "KOTLIN", "SWIFT", "RUBY", "PHP",
    "HTML", "CSS", "SASS", "LESS", "BOOTSTRAP", "TAILWIND",
    "MYSQL", "POSTGRESQL", "MONGODB", "REDIS", "ELASTICSEARCH",
    # business and domains
    "BUSINESS", "ENTERPRISE", "CORPORATE", "COMMERCIAL", "INDUSTRIAL",
    "FINANCIAL", "BANKING", "INSURANCE", "HEALTHCARE", "EDUCATION",
    "RETAIL", "ECOMMERCE", "LOGISTICS", "SUPPLY", "CHAIN", "MANUFACTURING",
    "SALES", "MARKETING", "CUSTOMER", "OPERATIONS", "STRATEGIC",
    # methodologies
    "AGILE", "SCRUM", "KANBAN", "WATERFALL", "DEVOPS", "CICD",
    "CONTINUOUS", "ITERATIVE", "INCREMENTAL", "LEAN", "SPRINT",
    # data and analytics
    "DATA", "INTELLIGENCE", "SCIENCE", "MINING", "WAREHOUSE",
    "LAKE", "ETL", "TRANSFORM", "VISUALIZATION", "DASHBOARD",
    "LEARNING", "ARTIFICIAL", "NEURAL", "DEEP",
    # quality
    "QUALITY", "ASSURANCE", "UNIT", "REGRESSION", "LOAD", "STRESS", "PENETRATION",
    # common resume words
    "EXPERIENCE", "PROFESSIONAL", "TECHNICAL", "CORE", "KEY", "MAJOR",
    "PRIMARY", "SECONDARY", "RESPONSIBLE", "MANAGED", "DEVELOPED",
    "IMPLEMENTED", "DESIGNED", "CREATED", "BUILT", "DEPLOYED",
    "MAINTAINED", "IMPROVED", "OPTIMIZED", "REDUCED", "INCREASED",
    "ACHIEVED", "DELIVERED", "COMPLETED", "COLLABORATED", "COORDINATED",
    "CERTIFICATE", "CERTIFICATION", "DEGREE", "BACHELOR", "MASTER",
    "DOCTORATE", "DIPLOMA", "COURSE", "TRAINING", "WORKSHOP", "SEMINAR",
})

# Strong hints that a "Word X" match sits inside a job title.
TECHNICAL_CONTEXT: frozenset[str] = frozenset({
    "AUTOMATION", "ROBOTIC", "PROCESS", "MACHINE", "SYSTEM",
    "ENGINEER", "SOFTWARE", "DEVELOPER",
})

FIRST_NAMES: frozenset[str] = frozenset({
    "James", "John", "Robert", "Michael", "William", "David", "Richard", "Joseph", "Thomas", "Charles",
    "Mary", "Patricia", "Jennifer", "Linda", "Barbara", "Elizabeth", "Susan", "Jessica", "Sarah", "Karen",
    "Daniel", "Matthew", "Anthony", "Donald", "Mark", "Paul", "Steven", "Andrew", "Kenneth", "Joshua",
    "Emily", "Ashley", "Kimberly", "Melissa", "Donna", "Michelle", "Dorothy", "Carol", "Amanda", "Betty",
    "Christopher", "Kevin", "Brian", "George", "Edward", "Ronald", "Timothy", "Jason", "Jeffrey", "Ryan",
})

LAST_NAMES: frozenset[str] = frozenset({
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson",
    "Walker", "Young", "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores",
})
