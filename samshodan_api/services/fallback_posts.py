"""Compiled-in blog posts.

Served when the content directory is missing or unreadable, and as the only
source when ``use_file_source`` is disabled.  Records use the same field names
as the Markdown front matter (camelCase) and go through ``normalize_post``
like file-backed posts.
"""

from typing import Any

FALLBACK_POSTS: list[dict[str, Any]] = [
    {
        "id": "ux-design-trends-2024",
        "slug": "ux-design-trends-2024",
        "title": "Top UX Design Trends Shaping Digital Experiences in 2024",
        "excerpt": (
            "Discover the latest UX design trends that are transforming how users "
            "interact with digital products, from AI-powered personalization to "
            "inclusive design practices."
        ),
        "content": """# Top UX Design Trends Shaping Digital Experiences in 2024

The digital landscape continues to evolve, and user experience design is at the forefront of this transformation.

## 1. AI-Powered Personalization

- **Dynamic Content Adaptation**: interfaces that adapt to user behavior
- **Predictive User Flows**: anticipating user needs
- **Intelligent Recommendations**: contextual suggestions

## 2. Inclusive and Accessible Design

Accessibility is no longer an afterthought. It is a fundamental design principle.

## The Future of UX Design

1. **Put users first** in every design decision
2. **Prioritize accessibility** from the ground up
3. **Focus on performance** and sustainability
""",
        "author": "Sarah Chen",
        "date": "2024-01-15",
        "category": "Design",
        "readTime": "6 min read",
        "tags": ["UX Design", "Design Trends", "User Experience", "Digital Design"],
        "published": True,
    },
    {
        "id": "accessibility-first-design",
        "slug": "accessibility-first-design",
        "title": "Building Accessibility-First Digital Experiences: A Complete Guide",
        "excerpt": (
            "Learn how to create inclusive digital experiences that work for "
            "everyone, with practical tips for implementing accessibility from the "
            "ground up."
        ),
        "content": """# Building Accessibility-First Digital Experiences

Creating digital experiences that work for everyone is essential for reaching your full audience.

## The POUR Principles

- **Perceivable**: information must be presentable in ways users can perceive
- **Operable**: interface components must be operable
- **Understandable**: content and operation must be understandable
- **Robust**: content must work with assistive technologies

## Getting Started

Audit your product against [WCAG 2.1](https://www.w3.org/TR/WCAG21/) and fix the highest-impact issues first.
""",
        "author": "Marcus Rodriguez",
        "date": "2024-02-08",
        "category": "Design",
        "readTime": "8 min read",
        "tags": ["Accessibility", "Inclusive Design", "WCAG", "User Experience"],
        "published": True,
    },
    {
        "id": "1",
        "slug": "future-of-ai-in-enterprise-applications",
        "title": "The Future of AI in Enterprise Applications",
        "excerpt": (
            "Exploring how artificial intelligence is transforming business "
            "processes and creating new opportunities for innovation across various "
            "industries."
        ),
        "content": """# The Future of AI in Enterprise Applications

Artificial intelligence is no longer a futuristic concept. It is a present-day reality transforming how enterprises operate.

## Key Areas of Impact

### Intelligent Automation

AI-powered automation handles repetitive work, freeing teams for strategic tasks.

### Predictive Analytics

Machine learning models forecast demand, detect anomalies and surface risks early.

## Getting Started

Start small, measure results, and scale what works.
""",
        "author": "Samshodan Team",
        "date": "2024-03-15",
        "category": "AI",
        "readTime": "5 min read",
        "tags": ["AI", "Enterprise", "Innovation", "Digital Transformation"],
        "published": True,
    },
    {
        "id": "microservices-architecture-guide",
        "slug": "microservices-architecture-guide",
        "title": "Microservices Architecture: A Complete Guide to Modern Software Design",
        "excerpt": (
            "Discover how microservices architecture can transform your software "
            "development process, improve scalability, and accelerate deployment "
            "cycles."
        ),
        "content": """# Microservices Architecture: A Complete Guide

Microservices split an application into small, independently deployable services.

## Core Principles

- **Single Responsibility**: each service owns one business capability
- **Decentralized Data**: each service manages its own database
- **Independent Deployment**: services ship on their own schedule

## Communication Patterns

```yaml
services:
  orders:
    depends_on: [inventory, payments]
```

Prefer asynchronous messaging between services where consistency allows it.
""",
        "author": "David Kim",
        "date": "2024-01-22",
        "category": "Development",
        "readTime": "8 min read",
        "tags": ["Microservices", "Software Architecture", "Scalability", "DevOps"],
        "published": True,
    },
    {
        "id": "api-first-development",
        "slug": "api-first-development",
        "title": "API-First Development: Building Scalable Digital Ecosystems",
        "excerpt": (
            "Learn how API-first development accelerates innovation, improves "
            "collaboration, and creates more flexible, scalable software "
            "architectures."
        ),
        "content": """# API-First Development

API-first development treats APIs as first-class products designed before any implementation.

## Benefits

1. Parallel development across frontend and backend teams
2. Consistent contracts documented with OpenAPI
3. Easier integration with partners

Design your contract first, then use `mock servers` to unblock consumers.
""",
        "author": "Elena Vasquez",
        "date": "2024-02-15",
        "category": "Development",
        "readTime": "7 min read",
        "tags": ["API Development", "Software Architecture", "REST", "GraphQL", "API Design"],
        "published": True,
    },
    {
        "id": "2",
        "slug": "modernizing-legacy-systems-strategic-approach",
        "title": "Modernizing Legacy Systems: A Strategic Approach",
        "excerpt": (
            "Best practices and strategies for successfully migrating legacy "
            "applications to modern cloud-native architectures without disrupting "
            "business operations."
        ),
        "content": """# Modernizing Legacy Systems: A Strategic Approach

Legacy systems often hold critical business logic but slow down innovation.

## Migration Strategies

- **Rehost**: lift and shift to the cloud
- **Refactor**: restructure code for cloud-native patterns
- **Replace**: adopt SaaS where it fits

## The Strangler Fig Pattern

Incrementally replace pieces of the legacy system behind a stable facade.
""",
        "author": "Samshodan Team",
        "date": "2024-03-10",
        "category": "Technology",
        "readTime": "7 min read",
        "tags": ["Legacy Systems", "Cloud Migration", "Architecture", "Digital Transformation"],
        "published": True,
    },
    {
        "id": "ecommerce-conversion-optimization",
        "slug": "ecommerce-conversion-optimization",
        "title": "E-commerce Conversion Optimization: Strategies That Drive Sales",
        "excerpt": (
            "Discover proven strategies to optimize your e-commerce platform for "
            "higher conversions, better user experience, and increased revenue."
        ),
        "content": """# E-commerce Conversion Optimization

Small improvements in conversion rate compound into significant revenue.

## Quick Wins

- Simplify checkout to as few steps as possible
- Show shipping costs early
- Offer guest checkout

## Measure Everything

Run A/B tests and let the data decide.
""",
        "author": "Rachel Thompson",
        "date": "2024-01-30",
        "category": "E-commerce",
        "readTime": "6 min read",
        "tags": ["E-commerce", "Conversion Optimization", "UX", "Sales", "Digital Marketing"],
        "published": True,
    },
    {
        "id": "headless-commerce-architecture",
        "slug": "headless-commerce-architecture",
        "title": "Headless Commerce Architecture: The Future of E-commerce Flexibility",
        "excerpt": (
            "Explore how headless commerce architecture enables faster "
            "development, better performance, and unlimited customization for "
            "modern e-commerce experiences."
        ),
        "content": """# Headless Commerce Architecture

Headless commerce decouples the storefront from the commerce engine.

## Why Go Headless

- **Flexibility**: any frontend, any channel
- **Performance**: static storefronts served from the edge
- **Speed**: frontend teams ship without backend releases
""",
        "author": "Alex Chen",
        "date": "2024-02-20",
        "category": "E-commerce",
        "readTime": "7 min read",
        "tags": ["Headless Commerce", "E-commerce Architecture", "API-First", "JAMstack", "Performance"],
        "published": True,
    },
    {
        "id": "3",
        "slug": "building-scalable-applications-microservices",
        "title": "Building Scalable Applications with Microservices",
        "excerpt": (
            "Learn how to design and implement microservices architecture for "
            "better scalability, maintainability, and team productivity."
        ),
        "content": """# Building Scalable Applications with Microservices

Scalability starts with clear service boundaries.

## Scaling Patterns

- Horizontal scaling behind a load balancer
- Caching hot reads
- Event-driven processing for spikes

```python
def handle(event):
    publish("orders.created", event)
```
""",
        "author": "Samshodan Team",
        "date": "2024-03-05",
        "category": "Development",
        "readTime": "6 min read",
        "tags": ["Microservices", "Scalability", "Architecture", "Software Design"],
        "published": True,
    },
    {
        "id": "cloud-migration-strategy",
        "slug": "cloud-migration-strategy",
        "title": "Cloud Migration Strategy: A Complete Guide to Successful Migration",
        "excerpt": (
            "Learn how to plan and execute a successful cloud migration with proven "
            "strategies, best practices, and real-world insights from enterprise "
            "migrations."
        ),
        "content": """# Cloud Migration Strategy

A successful migration is planned long before the first workload moves.

## Phases

1. Assess the current estate
2. Plan waves by dependency
3. Migrate and validate
4. Optimize cost and performance
""",
        "author": "Michael Rodriguez",
        "date": "2024-01-18",
        "category": "Cloud",
        "readTime": "9 min read",
        "tags": ["Cloud Migration", "AWS", "Azure", "Cloud Strategy", "Digital Transformation"],
        "published": True,
    },
    {
        "id": "kubernetes-best-practices",
        "slug": "kubernetes-best-practices",
        "title": "Kubernetes Best Practices: Production-Ready Container Orchestration",
        "excerpt": (
            "Master Kubernetes with proven best practices for security, "
            "scalability, and reliability in production environments. Learn from "
            "real-world implementations."
        ),
        "content": """# Kubernetes Best Practices

Running Kubernetes in production requires discipline around resources, security and observability.

## Resource Management

```yaml
resources:
  requests:
    cpu: "250m"
    memory: "256Mi"
  limits:
    memory: "512Mi"
```

## Security

- Run containers as non-root
- Use network policies
- Scan images in CI
""",
        "author": "Sarah Kim",
        "date": "2024-02-12",
        "category": "Cloud",
        "readTime": "10 min read",
        "tags": ["Kubernetes", "Container Orchestration", "DevOps", "Cloud Native", "Microservices"],
        "published": True,
    },
    {
        "id": "4",
        "slug": "rag-systems-enhancing-ai-real-time-data",
        "title": "RAG Systems: Enhancing AI with Real-time Data",
        "excerpt": (
            "Understanding Retrieval Augmented Generation and how it can improve AI "
            "applications by incorporating up-to-date information."
        ),
        "content": """# RAG Systems: Enhancing AI with Real-time Data

Retrieval Augmented Generation grounds model answers in fresh, relevant documents.

## How It Works

1. Index documents as embeddings
2. Retrieve the closest chunks for a query
3. Generate an answer with the retrieved context
""",
        "author": "Samshodan Team",
        "date": "2024-02-28",
        "category": "AI",
        "readTime": "8 min read",
        "tags": ["RAG", "AI", "Machine Learning", "Information Retrieval"],
        "published": True,
    },
    {
        "id": "application-monitoring-strategies",
        "slug": "application-monitoring-strategies",
        "title": "Application Monitoring Strategies: Ensuring Peak Performance and Reliability",
        "excerpt": (
            "Learn comprehensive application monitoring strategies that help you "
            "detect issues early, optimize performance, and maintain high "
            "availability in production environments."
        ),
        "content": """# Application Monitoring Strategies

You cannot fix what you cannot see.

## The Three Pillars

- **Metrics**: numeric signals over time
- **Logs**: discrete events with context
- **Traces**: the path of a request through services

> Alert on symptoms users feel, not on every cause.
""",
        "author": "Jennifer Park",
        "date": "2024-01-25",
        "category": "DevOps",
        "readTime": "8 min read",
        "tags": ["Application Monitoring", "Performance", "Observability", "DevOps", "SRE"],
        "published": True,
    },
    {
        "id": "devops-automation-best-practices",
        "slug": "devops-automation-best-practices",
        "title": "DevOps Automation Best Practices: Streamlining Development and Operations",
        "excerpt": (
            "Discover proven DevOps automation strategies that accelerate delivery, "
            "improve reliability, and reduce operational overhead in modern "
            "software development."
        ),
        "content": """# DevOps Automation Best Practices

Automation turns fragile manual steps into repeatable pipelines.

## What to Automate First

1. Builds and tests on every commit
2. Infrastructure as Code
3. Deployments with automatic rollback
""",
        "author": "Robert Chen",
        "date": "2024-02-05",
        "category": "DevOps",
        "readTime": "9 min read",
        "tags": ["DevOps", "Automation", "CI/CD", "Infrastructure as Code", "Deployment"],
        "published": True,
    },
    {
        "id": "5",
        "slug": "cloud-native-development-best-practices",
        "title": "Cloud-Native Development Best Practices",
        "excerpt": (
            "Essential practices for building applications that fully leverage "
            "cloud computing capabilities and modern development methodologies."
        ),
        "content": """# Cloud-Native Development Best Practices

Cloud-native development requires a holistic approach across architecture, practices and culture.

## Foundations

- Twelve-factor configuration
- Stateless services
- Observability built in

*Ready to embrace cloud-native development? Our application development team can help.*
""",
        "author": "Samshodan Team",
        "date": "2024-02-20",
        "category": "Development",
        "readTime": "6 min read",
        "tags": ["Cloud Native", "DevOps", "Best Practices", "Microservices"],
        "published": True,
    },
    {
        "id": "6",
        "slug": "api-first-design-building-for-future",
        "title": "API-First Design: Building for the Future",
        "excerpt": (
            "Why API-first design is crucial for modern applications and how it "
            "enables better integration and scalability."
        ),
        "content": """# API-First Design: Building for the Future

Success with API-first design requires careful planning and adherence to standards.

## Checklist

- Version your APIs from day one
- Document with OpenAPI
- Monitor usage and errors

*Ready to implement API-first design? Our team can help.*
""",
        "author": "Samshodan Team",
        "date": "2024-02-15",
        "category": "Development",
        "readTime": "5 min read",
        "tags": ["API Design", "Integration", "Architecture", "Best Practices"],
        "published": True,
    },
    {
        "id": "rag-systems-implementation",
        "slug": "rag-systems-implementation",
        "title": "Building RAG Systems: A Complete Guide to Retrieval Augmented Generation",
        "excerpt": (
            "Learn how to build powerful RAG systems that combine your proprietary "
            "data with large language models for accurate, contextual AI "
            "applications."
        ),
        "content": """# Building RAG Systems

RAG combines your proprietary data with large language models.

## Architecture

- **Ingestion**: chunk and embed documents
- **Vector store**: similarity search over embeddings
- **Generation**: prompt the model with retrieved context

```python
chunks = store.search(embed(query), k=5)
answer = llm.generate(query, context=chunks)
```

RAG systems are a powerful approach to building AI applications grounded in factual information.
""",
        "author": "Dr. Lisa Wang",
        "date": "2024-01-12",
        "category": "AI",
        "readTime": "12 min read",
        "tags": ["RAG", "AI", "LLM", "Vector Databases", "Machine Learning", "NLP"],
        "published": True,
    },
    {
        "id": "ai-automation-workflows",
        "slug": "ai-automation-workflows",
        "title": "AI-Powered Automation Workflows: Transforming Business Operations",
        "excerpt": (
            "Discover how to build intelligent automation workflows that leverage "
            "AI to streamline processes, reduce manual work, and improve "
            "operational efficiency."
        ),
        "content": """# AI-Powered Automation Workflows

AI automation augments human capabilities rather than replacing them.

## Where to Start

1. Document processing
2. Ticket triage
3. Report generation
""",
        "author": "Dr. Amanda Foster",
        "date": "2024-02-28",
        "category": "AI",
        "readTime": "10 min read",
        "tags": [
            "AI Automation",
            "Workflow Automation",
            "Process Optimization",
            "Machine Learning",
            "Business Intelligence",
        ],
        "published": True,
    },
]
