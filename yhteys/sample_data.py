"""Built-in sample startup catalog.

These profiles are shown to enterprises alongside any startups that have
registered locally, so search has something to work with on a fresh
install.
"""
from typing import Any, Dict, List

from yhteys.models import StartupRecord


SAMPLE_STARTUPS: List[Dict[str, Any]] = [
    {
        "id": "startup_1",
        "name": "AI Workflow Solutions",
        "description": (
            "Revolutionary AI-powered automation platform that streamlines enterprise workflows "
            "and increases productivity by 300%. Our cutting-edge machine learning algorithms "
            "adapt to your business processes."
        ),
        "industry": "SaaS",
        "location": "San Francisco, CA",
        "website": "https://aiworkflow.com",
        "contact": {"email": "contact@aiworkflow.com", "phone": "+1 (555) 123-4567"},
        "teamMembers": [
            {"name": "Sarah Chen", "role": "CEO & Co-founder", "email": "sarah@aiworkflow.com"},
            {"name": "Marcus Rodriguez", "role": "CTO & Co-founder", "email": "marcus@aiworkflow.com"},
            {"name": "Lisa Thompson", "role": "Head of Product", "email": "lisa@aiworkflow.com"},
        ],
        "projects": [
            {
                "name": "Enterprise Automation Suite",
                "description": "Complete workflow automation solution for large enterprises",
                "technologies": ["Python", "TensorFlow", "React", "Node.js", "PostgreSQL"],
            },
            {
                "name": "AI Analytics Dashboard",
                "description": "Real-time analytics and insights for workflow optimization",
                "technologies": ["React", "D3.js", "Python", "Apache Kafka"],
            },
        ],
        "tags": ["AI", "automation", "workflow", "enterprise", "productivity", "machine learning"],
        "fundingStage": "Series A",
        "teamSize": 15,
        "foundedYear": 2021,
        "rating": 4.8,
    },
    {
        "id": "startup_2",
        "name": "DataFlow Analytics",
        "description": (
            "Advanced data analytics platform helping enterprises make data-driven decisions. "
            "Real-time processing of big data with intuitive visualization tools."
        ),
        "industry": "AI/ML",
        "location": "New York, NY",
        "website": "https://dataflow.io",
        "contact": {"email": "hello@dataflow.io", "phone": "+1 (555) 987-6543"},
        "teamMembers": [
            {"name": "Alex Johnson", "role": "CEO", "email": "alex@dataflow.io"},
            {"name": "Maria Garcia", "role": "Head of Engineering", "email": "maria@dataflow.io"},
        ],
        "projects": [
            {
                "name": "Real-time Analytics Engine",
                "description": "High-performance analytics engine for real-time data processing",
                "technologies": ["Apache Spark", "Kafka", "Elasticsearch", "React"],
            },
        ],
        "tags": ["data analytics", "big data", "visualization", "real-time", "business intelligence"],
        "fundingStage": "Seed",
        "teamSize": 8,
        "foundedYear": 2022,
        "rating": 4.6,
    },
    {
        "id": "startup_3",
        "name": "SecureCloud Pro",
        "description": (
            "Next-generation cybersecurity platform protecting enterprise cloud infrastructure "
            "with AI-powered threat detection and automated response systems."
        ),
        "industry": "Cybersecurity",
        "location": "Austin, TX",
        "website": "https://securecloud.pro",
        "contact": {"email": "security@securecloud.pro", "phone": "+1 (555) 456-7890"},
        "teamMembers": [
            {"name": "David Kim", "role": "CEO & Founder", "email": "david@securecloud.pro"},
            {"name": "Jennifer Wu", "role": "Head of Security", "email": "jennifer@securecloud.pro"},
            {"name": "Robert Brown", "role": "Lead Developer", "email": "robert@securecloud.pro"},
        ],
        "projects": [
            {
                "name": "AI Threat Detection",
                "description": "Machine learning-based threat detection system",
                "technologies": ["Python", "TensorFlow", "AWS", "Docker", "Kubernetes"],
            },
            {
                "name": "Automated Response System",
                "description": "Automated incident response and remediation platform",
                "technologies": ["Go", "Redis", "PostgreSQL", "Terraform"],
            },
        ],
        "tags": ["cybersecurity", "cloud security", "AI", "threat detection", "automation"],
        "fundingStage": "Series B",
        "teamSize": 25,
        "foundedYear": 2020,
        "rating": 4.9,
    },
    {
        "id": "startup_4",
        "name": "EcoTech Innovations",
        "description": (
            "Sustainable technology solutions for smart cities. IoT sensors and AI analytics "
            "for environmental monitoring and energy optimization."
        ),
        "industry": "CleanTech",
        "location": "Seattle, WA",
        "website": "https://ecotech.green",
        "contact": {"email": "info@ecotech.green", "phone": "+1 (555) 321-0987"},
        "teamMembers": [
            {"name": "Emma Wilson", "role": "CEO", "email": "emma@ecotech.green"},
            {"name": "James Park", "role": "CTO", "email": "james@ecotech.green"},
        ],
        "projects": [
            {
                "name": "Smart City Sensors",
                "description": "IoT sensor network for environmental monitoring",
                "technologies": ["IoT", "Arduino", "LoRaWAN", "Python", "MongoDB"],
            },
        ],
        "tags": ["IoT", "smart cities", "environmental", "sustainability", "sensors"],
        "fundingStage": "Pre-Seed",
        "teamSize": 6,
        "foundedYear": 2023,
        "rating": 4.4,
    },
    {
        "id": "startup_5",
        "name": "HealthTech Connect",
        "description": (
            "Digital health platform connecting patients with healthcare providers through "
            "telemedicine and AI-powered health monitoring."
        ),
        "industry": "HealthTech",
        "location": "Boston, MA",
        "website": "https://healthtech.connect",
        "contact": {"email": "contact@healthtech.connect", "phone": "+1 (555) 654-3210"},
        "teamMembers": [
            {"name": "Dr. Michael Chen", "role": "CEO & Co-founder", "email": "michael@healthtech.connect"},
            {"name": "Sarah Johnson", "role": "COO & Co-founder", "email": "sarah@healthtech.connect"},
        ],
        "projects": [
            {
                "name": "Telemedicine Platform",
                "description": "Secure video consultation platform for healthcare",
                "technologies": ["React", "WebRTC", "Node.js", "MongoDB", "AWS"],
            },
        ],
        "tags": ["telemedicine", "healthcare", "AI", "digital health", "patient care"],
        "fundingStage": "Seed",
        "teamSize": 12,
        "foundedYear": 2021,
        "rating": 4.7,
    },
    # Demo profile used in the guided marketplace walkthrough
    {
        "id": "startup_techflow_2024",
        "name": "TechFlow Innovations",
        "description": (
            "We are a cutting-edge startup specializing in AI-powered business automation and "
            "workflow optimization. Our team of experienced engineers and data scientists creates "
            "intelligent solutions that help enterprises streamline their operations, reduce costs, "
            "and accelerate growth through advanced machine learning and process automation."
        ),
        "industry": "SaaS",
        "location": "Austin, TX",
        "website": "https://techflow-innovations.com",
        "contact": {"email": "hello@techflow-innovations.com", "phone": "+1 (512) 555-0123"},
        "teamMembers": [
            {"name": "Alex Chen", "role": "CEO & Co-founder", "email": "alex@techflow-innovations.com"},
            {"name": "Sarah Rodriguez", "role": "CTO & Co-founder", "email": "sarah@techflow-innovations.com"},
            {"name": "Michael Kim", "role": "Head of AI/ML", "email": "michael@techflow-innovations.com"},
            {"name": "Emily Johnson", "role": "Lead Full-Stack Developer", "email": "emily@techflow-innovations.com"},
            {"name": "David Park", "role": "DevOps Engineer", "email": "david@techflow-innovations.com"},
        ],
        "projects": [
            {
                "name": "SmartFlow AI Platform",
                "description": (
                    "Intelligent workflow automation platform that uses machine learning to optimize "
                    "business processes and reduce manual work by up to 80%"
                ),
                "technologies": ["Python", "TensorFlow", "React", "Node.js", "PostgreSQL", "Docker", "AWS", "Redis"],
            },
            {
                "name": "DataSync Enterprise",
                "description": (
                    "Real-time data integration and synchronization solution for enterprise systems "
                    "with advanced analytics and monitoring"
                ),
                "technologies": ["Apache Kafka", "Elasticsearch", "React", "Python", "MongoDB", "Kubernetes"],
            },
            {
                "name": "AutoReport Pro",
                "description": (
                    "AI-powered reporting and analytics dashboard that automatically generates insights "
                    "and recommendations from business data"
                ),
                "technologies": ["Python", "Pandas", "D3.js", "React", "FastAPI", "PostgreSQL"],
            },
        ],
        "tags": [
            "AI", "automation", "workflow", "enterprise", "machine learning",
            "data analytics", "SaaS", "business intelligence",
        ],
        "fundingStage": "Series A",
        "teamSize": 12,
        "foundedYear": 2022,
        "rating": 4.8,
    },
]


def get_sample_startups() -> List[StartupRecord]:
    """Return fresh records for the sample catalog."""
    return [StartupRecord.from_dict(s) for s in SAMPLE_STARTUPS]
