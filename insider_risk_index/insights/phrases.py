"""
Phrase library for generated insights.

Every sentence the insight generator can emit lives here, keyed by category
and score bucket, maturity level, industry slug or size slug.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Category × bucket
# ---------------------------------------------------------------------------
CATEGORY_PHRASES: dict[str, dict[str, list[str]]] = {
    "visibility": {
        "high": [
            "Strong monitoring and detection capabilities across your environment",
            "Comprehensive visibility into user behavior and data movement",
            "Well-established logging and monitoring infrastructure",
            "Effective real-time threat detection systems in place",
        ],
        "medium": [
            "Moderate visibility into user activities and data access",
            "Basic monitoring systems deployed but gaps exist",
            "Some blind spots in detection coverage remain",
            "Partial visibility into high-risk user behaviors",
        ],
        "low": [
            "Limited visibility into insider activities and data movement",
            "Insufficient monitoring and detection capabilities",
            "Significant gaps in user behavior monitoring",
            "Lack of comprehensive logging infrastructure",
        ],
    },
    "prevention-coaching": {
        "high": [
            "Excellent security awareness training and coaching programs",
            "Strong culture of security consciousness across the organization",
            "Regular, targeted training based on role and risk level",
            "Effective feedback loops between security incidents and training",
        ],
        "medium": [
            "Basic security training programs in place",
            "Moderate employee engagement with security practices",
            "Annual training conducted but lacks personalization",
            "Some improvement needed in security culture development",
        ],
        "low": [
            "Minimal or outdated security awareness training",
            "Limited employee understanding of insider threats",
            "Lack of regular security coaching and reinforcement",
            "Weak security culture with low awareness levels",
        ],
    },
    "investigation-evidence": {
        "high": [
            "Robust forensic capabilities and incident response procedures",
            "Comprehensive evidence collection and preservation processes",
            "Well-documented investigation workflows and playbooks",
            "Strong chain of custody and legal readiness",
        ],
        "medium": [
            "Basic forensic tools and incident response capabilities",
            "Some evidence collection procedures in place",
            "Moderate investigation capabilities with room for improvement",
            "Partial documentation of incident response processes",
        ],
        "low": [
            "Limited forensic and investigation capabilities",
            "Insufficient evidence collection and preservation procedures",
            "Lack of formal incident response processes",
            "Poor documentation and chain of custody practices",
        ],
    },
    "identity-saas": {
        "high": [
            "Strong identity and access management controls",
            "Comprehensive privileged access management (PAM) implementation",
            "Well-managed SaaS application inventory and controls",
            "Effective zero-trust architecture principles applied",
        ],
        "medium": [
            "Basic identity management with some gaps",
            "Partial privileged access controls implemented",
            "Some SaaS governance but inventory incomplete",
            "Working toward zero-trust maturity",
        ],
        "low": [
            "Weak identity and access management practices",
            "Limited control over privileged accounts",
            "Poor visibility and control of SaaS applications",
            "Traditional perimeter-based security model",
        ],
    },
    "phishing-resilience": {
        "high": [
            "Advanced anti-phishing technologies and email security",
            "Regular phishing simulations with strong user performance",
            "Strong user reporting culture for suspicious emails",
            "Comprehensive email authentication (SPF, DKIM, DMARC)",
        ],
        "medium": [
            "Basic email security filters in place",
            "Occasional phishing simulations conducted",
            "Some user awareness of phishing threats",
            "Partial email authentication implementation",
        ],
        "low": [
            "Minimal phishing defenses in place",
            "Rare or no phishing simulation exercises",
            "Low user awareness of social engineering tactics",
            "Lack of email authentication protocols",
        ],
    },
}

CATEGORY_RECOMMENDATIONS: dict[str, dict[str, str]] = {
    "visibility": {
        "high": "Implement advanced user behavior analytics (UBA) to identify subtle anomalies",
        "medium": "Expand monitoring coverage to include all critical systems and data repositories",
        "low": "Deploy comprehensive DLP and SIEM solutions for baseline visibility",
    },
    "prevention-coaching": {
        "high": "Develop micro-learning modules for continuous security reinforcement",
        "medium": "Implement role-based training programs with regular phishing simulations",
        "low": "Establish comprehensive security awareness program with monthly training cadence",
    },
    "investigation-evidence": {
        "high": "Enhance forensic automation and integrate threat intelligence feeds",
        "medium": "Develop comprehensive incident response playbooks and conduct tabletop exercises",
        "low": "Build foundational forensic capabilities and establish evidence handling procedures",
    },
    "identity-saas": {
        "high": "Implement continuous authentication and risk-based access controls",
        "medium": "Deploy PAM solution and establish SaaS security posture management (SSPM)",
        "low": "Implement multi-factor authentication (MFA) and basic identity governance",
    },
    "phishing-resilience": {
        "high": "Deploy AI-powered email security with real-time threat sandboxing",
        "medium": "Increase phishing simulation frequency and implement user reporting tools",
        "low": "Implement basic email security gateway and monthly phishing awareness training",
    },
}


# ---------------------------------------------------------------------------
# Maturity level
# ---------------------------------------------------------------------------
LEVEL_RECOMMENDATIONS: dict[int, list[str]] = {
    1: [
        "Establish a formal insider risk management program with executive sponsorship",
        "Conduct comprehensive risk assessment to identify critical assets and vulnerabilities",
        "Implement basic monitoring and logging across all critical systems",
        "Develop incident response procedures specifically for insider threats",
        "Create security awareness training program focused on insider risk",
    ],
    2: [
        "Enhance monitoring capabilities with user behavior analytics",
        "Implement data loss prevention (DLP) solutions for sensitive data",
        "Develop role-based training programs for high-risk positions",
        "Establish formal investigation procedures with legal coordination",
        "Deploy privileged access management (PAM) for administrative accounts",
    ],
    3: [
        "Integrate threat intelligence feeds into detection systems",
        "Implement zero-trust architecture principles organization-wide",
        "Conduct regular tabletop exercises for insider threat scenarios",
        "Enhance forensic capabilities with automated evidence collection",
        "Develop predictive risk scoring for user activities",
    ],
    4: [
        "Deploy machine learning models for anomaly detection",
        "Implement continuous risk assessment and adaptive controls",
        "Establish threat hunting program focused on insider indicators",
        "Create insider threat fusion center with cross-functional team",
        "Develop automated response playbooks for common scenarios",
    ],
    5: [
        "Optimize AI-driven detection with custom threat models",
        "Implement predictive analytics for early threat identification",
        "Establish continuous improvement metrics and benchmarking",
        "Lead industry collaboration on insider threat intelligence",
        "Develop advanced deception technologies and honeypots",
    ],
}


# ---------------------------------------------------------------------------
# Organisational context (keys are normalized slugs)
# ---------------------------------------------------------------------------
INDUSTRY_RECOMMENDATIONS: dict[str, list[str]] = {
    "financial-services": [
        "Implement transaction monitoring for unusual financial activities",
        "Enhance segregation of duties in critical financial processes",
        "Deploy advanced fraud detection systems integrated with insider risk monitoring",
    ],
    "healthcare": [
        "Strengthen PHI access controls and audit logging per HIPAA requirements",
        "Implement medical record access monitoring with anomaly detection",
        "Enhance workforce training on patient privacy and data protection",
    ],
    "technology": [
        "Protect intellectual property with code repository monitoring",
        "Implement software supply chain security controls",
        "Monitor developer activities and source code access patterns",
    ],
    "government": [
        "Enhance clearance management and continuous vetting processes",
        "Implement classification-based data controls and monitoring",
        "Strengthen foreign influence and espionage detection capabilities",
    ],
    "retail": [
        "Monitor point-of-sale systems for unauthorized access",
        "Implement customer data protection controls",
        "Enhance inventory and financial fraud detection",
    ],
    "manufacturing": [
        "Protect trade secrets and manufacturing processes",
        "Monitor industrial control systems for insider tampering",
        "Implement supply chain security controls",
    ],
    "education": [
        "Protect student records and research data",
        "Monitor administrative access to academic systems",
        "Implement academic integrity monitoring",
    ],
}

SIZE_RECOMMENDATIONS: dict[str, list[str]] = {
    "1-50": [
        "Focus on foundational security controls and awareness",
        "Implement cost-effective cloud-based security solutions",
        "Establish clear security policies and procedures",
    ],
    "51-200": [
        "Build dedicated security team or outsource to MSSP",
        "Implement centralized logging and monitoring",
        "Develop formal incident response capabilities",
    ],
    "201-1000": [
        "Establish security operations center (SOC) capabilities",
        "Deploy enterprise DLP and SIEM solutions",
        "Create insider threat program with dedicated resources",
    ],
    "1001-5000": [
        "Implement advanced threat detection with ML/AI",
        "Establish insider threat fusion center",
        "Deploy comprehensive identity governance platform",
    ],
    "5000+": [
        "Develop custom threat intelligence capabilities",
        "Implement organization-wide zero-trust architecture",
        "Create advanced analytics and predictive risk models",
    ],
}


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------
FALLBACK_STRENGTHS: dict[str, list[str]] = {
    # level >= 3
    "established": [
        "Organization demonstrates commitment to insider risk management",
        "Foundation established for security program maturation",
        "Leadership engagement in security initiatives evident",
    ],
    # level < 3
    "emerging": [
        "Assessment completion shows security awareness",
        "Opportunity identified for significant improvements",
        "Baseline established for tracking progress",
    ],
}

FALLBACK_WEAKNESSES: list[str] = [
    "Insider risk metrics are not yet tracked against peer benchmarks",
    "Cross-functional ownership of insider risk is not yet formalized",
    "Program effectiveness is not yet measured through regular reassessment",
]

FALLBACK_RECOMMENDATIONS: list[str] = [
    "Conduct quarterly assessments to track improvement progress",
    "Engage executive leadership for insider risk program sponsorship",
    "Develop metrics and KPIs for measuring program effectiveness",
    "Create cross-functional insider threat team",
    "Benchmark against industry peers regularly",
]

# Templated fallbacks, formatted with category/level context
WEAKNESS_NEEDS_ENHANCEMENT = "{name} capabilities need enhancement ({score}% maturity)"
WEAKNESS_OPPORTUNITY = "Opportunity to strengthen {name_lower} capabilities"
STRENGTH_LEVEL = "Achieved Level {level} maturity in insider risk management"
STRENGTH_OVERALL = "Overall program maturity of {score}% demonstrates progress"
