"""
Question catalog — The 20 assessment questions, four per category.

Each question carries a local weight used as a relative multiplier inside its
category, and five ordered options scored 0/25/50/75/100.

CAPABILITY_BONUS_RULES is authored here alongside the questions it applies to:
it names the questions whose upper-tier answers describe in-the-moment
intervention capabilities, and is only consulted when the scoring config
enables the bonus.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AnswerOption:
    value: float
    label: str
    description: str = ""


@dataclass(frozen=True)
class Question:
    """A single assessment question bound to one category."""
    id: str
    category_id: str
    prompt: str
    options: tuple[AnswerOption, ...]
    weight: float                        # Relative multiplier within the category
    explanation: str = ""                # Citation / rationale text
    matrix_techniques: tuple[str, ...] = ()

    @property
    def option_values(self) -> frozenset[float]:
        return frozenset(o.value for o in self.options)

    def option_for(self, value: float) -> Optional[AnswerOption]:
        for option in self.options:
            if option.value == value:
                return option
        return None


@dataclass(frozen=True)
class CapabilityBonus:
    """Fixed upward adjustment for upper-tier answers on a marked question."""
    marker: str                          # Capability the question's top tier describes
    min_value: float = 75.0
    max_value: float = 99.0
    points: float = 2.0

    def applies(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


def _options(*rows: tuple[str, str]) -> tuple[AnswerOption, ...]:
    values = (0, 25, 50, 75, 100)
    return tuple(
        AnswerOption(value=float(v), label=label, description=desc)
        for v, (label, desc) in zip(values, rows)
    )


QUESTIONS: tuple[Question, ...] = (
    # ── Visibility ──────────────────────────────────────────────────────────
    Question(
        id="v1",
        category_id="visibility",
        prompt="How comprehensive is your organization's endpoint monitoring and logging?",
        options=_options(
            ("No centralized monitoring", "Limited to basic antivirus with no asset management"),
            ("Basic monitoring", "Some EDR agents with a basic asset inventory"),
            ("Moderate coverage", "EDR deployed with asset management"),
            ("Good coverage", "Comprehensive EDR/XDR with detailed logging and configuration management"),
            ("Excellent coverage", "Full endpoint visibility with real-time behavioral analytics and complete asset lifecycle management"),
        ),
        weight=0.3,
        explanation=(
            "Organizations with comprehensive endpoint visibility experience 40% "
            "faster threat detection (Gartner, G00805757, 2024)."
        ),
        matrix_techniques=("ME001", "ME024"),
    ),
    Question(
        id="v2",
        category_id="visibility",
        prompt="How effectively can you understand user intent and intervene in real-time?",
        options=_options(
            ("No behavioral monitoring", "No tracking of user intent or activities"),
            ("Basic access logs", "Login/logout tracking with post-incident analysis only"),
            ("Application usage tracking", "Application access patterns tracked but limited intent analysis"),
            ("Behavioral analytics with alerts", "User behavior analysis with alerting but primarily reactive responses"),
            ("Real-time intent analysis", "Behavioral analytics that understand user intent and enable proactive intervention during risky activities"),
        ),
        weight=0.25,
        explanation=(
            "Organizations with real-time behavioral intervention reduce incident "
            "costs by 45% compared to detection-only approaches (Ponemon Institute, 2025)."
        ),
        matrix_techniques=("MT018",),
    ),
    Question(
        id="v3",
        category_id="visibility",
        prompt="How effectively do you capture user context and behavior across all applications?",
        options=_options(
            ("No application monitoring", "No visibility into application usage or user behavior"),
            ("Basic access logging", "Limited logs from individual applications with no correlation"),
            ("Integrated app monitoring", "Some visibility across applications but lacking behavioral context"),
            ("Cross-platform visibility", "Monitoring across SaaS and internal applications with basic behavioral tracking"),
            ("Comprehensive session intelligence", "Complete visibility across SaaS, internal and custom applications with full context and intent analysis"),
        ),
        weight=0.25,
        explanation=(
            "Organizations use an average of 87 SaaS applications, making "
            "cross-platform visibility essential (Gartner Market Guide, 2024)."
        ),
        matrix_techniques=("ME024", "ME001"),
    ),
    Question(
        id="v4",
        category_id="visibility",
        prompt="What is your network traffic monitoring capability?",
        options=_options(
            ("No network monitoring", "Basic firewall logs only"),
            ("Perimeter monitoring", "External network traffic patterns monitored"),
            ("Internal traffic visibility", "Network monitoring with basic internal traffic analysis"),
            ("Comprehensive network analytics", "Full network visibility with documented traffic baselines and alerting"),
            ("Advanced threat detection", "Network behavior analysis producing regular documented threat detections"),
        ),
        weight=0.2,
        explanation=(
            "56% of insider attack vectors involve information disclosure "
            "(Gartner G00805757, 2024)."
        ),
    ),

    # ── Prevention & Coaching ───────────────────────────────────────────────
    Question(
        id="pc1",
        category_id="prevention-coaching",
        prompt="How effectively do you guide and coach users during risky activities in real-time?",
        options=_options(
            ("No behavioral guidance", "No coaching or intervention during risky user activities"),
            ("Periodic training only", "Annual security training with no real-time guidance"),
            ("Alert-based warnings", "Email alerts or post-action notifications about policy violations"),
            ("In-session notifications", "Pop-up warnings and guidance during potentially risky activities"),
            ("Real-time behavioral coaching", "Contextual, in-the-moment guidance that changes behavior without blocking work"),
        ),
        weight=0.3,
        explanation=(
            "Contextual, in-the-moment guidance reduces risky behavior by 60% "
            "compared to periodic training alone (Ponemon Institute, 2025)."
        ),
    ),
    Question(
        id="pc2",
        category_id="prevention-coaching",
        prompt=(
            "What screening processes do you have for employees with privileged access "
            "(admin accounts, classified data, OT systems, research environments)?"
        ),
        options=_options(
            ("No additional screening", "Standard hiring process only"),
            ("Basic background checks", "Criminal background verification and drug testing"),
            ("Enhanced screening", "Credit checks, reference verification and periodic drug testing"),
            ("Comprehensive vetting", "Regular re-screening and psychological assessments"),
            ("Continuous monitoring", "Ongoing screening with behavioral indicators and regular re-vetting"),
        ),
        weight=0.25,
        explanation=(
            "More than 50% of insider incidents lack malicious intent, so early "
            "identification of at-risk individuals matters (Gartner G00805757, 2024)."
        ),
    ),
    Question(
        id="pc3",
        category_id="prevention-coaching",
        prompt="How well do you monitor and support employee well-being and satisfaction?",
        options=_options(
            ("No formal program", "No employee wellness initiatives"),
            ("Basic HR support", "Standard HR complaint processes"),
            ("Employee assistance program", "EAP and basic wellness resources"),
            ("Proactive wellness monitoring", "Satisfaction surveys, stress management and early intervention support"),
            ("Comprehensive program", "HR analytics, mental health support, career coaching and burnout prevention"),
        ),
        weight=0.2,
        explanation=(
            "62% of insider incidents correlate with declining employee "
            "satisfaction scores (Ponemon Institute, 2025)."
        ),
    ),
    Question(
        id="pc4",
        category_id="prevention-coaching",
        prompt="What policies and procedures do you have for reporting suspicious behavior?",
        options=_options(
            ("No formal process", "No established reporting mechanisms"),
            ("Basic reporting channels", "Standard HR or security reporting"),
            ("Anonymous reporting system", "Anonymous hotline or web portal"),
            ("Multiple reporting options", "Various channels with protection for reporters"),
            ("Comprehensive program", "Incentivized reporting with follow-up processes"),
        ),
        weight=0.25,
        explanation="Effective reporting mechanisms enable early detection of insider threats.",
    ),

    # ── Investigation & Evidence ────────────────────────────────────────────
    Question(
        id="ie1",
        category_id="investigation-evidence",
        prompt="What forensic investigation capabilities does your organization have?",
        options=_options(
            ("No forensic capability", "No digital forensics resources"),
            ("Basic incident response", "Limited investigation capabilities with basic training"),
            ("Internal forensics team", "Dedicated team with basic tools and formal training"),
            ("Advanced forensics", "Comprehensive tools, advanced training and certified personnel"),
            ("Expert capabilities", "Advanced forensics with legal admissibility standards"),
        ),
        weight=0.3,
        explanation=(
            "70% of organizations cite technical challenges or cost as the main "
            "obstacle to insider threat management (Gartner G00805757, 2024)."
        ),
    ),
    Question(
        id="ie2",
        category_id="investigation-evidence",
        prompt="How effectively can you reconstruct and replay user sessions for investigations?",
        options=_options(
            ("No session recording", "Basic access logs with no session context"),
            ("Basic activity logs", "Some application logs but no session reconstruction"),
            ("Screen recording tools", "Basic screen recording with limited context and searchability"),
            ("Detailed session tracking", "Comprehensive session logs with timeline reconstruction"),
            ("Immutable session replay", "Complete session reconstruction with searchable, audit-ready evidence"),
        ),
        weight=0.25,
        explanation=(
            "Comprehensive session replay reduces investigation time by 70% "
            "(Ponemon Institute, 2025)."
        ),
    ),
    Question(
        id="ie3",
        category_id="investigation-evidence",
        prompt="What incident response procedures do you have for insider threats?",
        options=_options(
            ("No specific procedures", "No insider threat incident response plan"),
            ("Basic response plan", "General security incident procedures"),
            ("Insider threat procedures", "Specific procedures for insider incidents"),
            ("Comprehensive playbooks", "Detailed playbooks with roles and responsibilities"),
            ("Tested and refined procedures", "Regularly tested and updated procedures"),
        ),
        weight=0.25,
        explanation="Specialized response procedures are crucial for insider threat management.",
    ),
    Question(
        id="ie4",
        category_id="investigation-evidence",
        prompt="How well do you coordinate with legal and HR teams during investigations?",
        options=_options(
            ("No coordination", "No established coordination processes"),
            ("Ad-hoc coordination", "Case-by-case coordination as needed"),
            ("Defined processes", "Clear escalation and coordination procedures"),
            ("Integrated approach", "Joint investigation teams and procedures"),
            ("Seamless coordination", "Fully integrated legal, HR and security processes"),
        ),
        weight=0.2,
        explanation="Coordination keeps investigations thorough and legally sound.",
    ),

    # ── Identity & SaaS/OAuth ───────────────────────────────────────────────
    Question(
        id="is1",
        category_id="identity-saas",
        prompt="How robust is your identity and access management (IAM) system?",
        options=_options(
            ("Basic user accounts", "Simple username/password authentication"),
            ("Centralized authentication", "Single sign-on (SSO) implementation"),
            ("Role-based access control", "RBAC with defined user roles"),
            ("Advanced IAM", "Automated lifecycle management, PAM, identity analytics and non-human identity management"),
            ("Adaptive authentication within zero trust", "Continuous verification and adaptive authentication"),
        ),
        weight=0.3,
        explanation=(
            "IAM is a critical foundation for comprehensive insider risk programs "
            "(Gartner G00805757, 2024)."
        ),
    ),
    Question(
        id="is2",
        category_id="identity-saas",
        prompt="What multi-factor authentication (MFA) coverage do you have?",
        options=_options(
            ("No MFA", "Password-only authentication"),
            ("Limited MFA", "MFA for some admin accounts"),
            ("Selective MFA", "MFA for privileged and remote access"),
            ("Broad MFA coverage", "MFA for most systems and users"),
            ("Universal MFA", "MFA required for all access with adaptive controls"),
        ),
        weight=0.25,
        explanation="MFA significantly reduces the risk of account compromise.",
    ),
    Question(
        id="is3",
        category_id="identity-saas",
        prompt="How do you manage privileged access and administrative accounts?",
        options=_options(
            ("No special controls", "Admin accounts managed like regular users"),
            ("Basic admin controls", "Separate admin accounts with stronger passwords"),
            ("Privileged account management", "PAM solution with basic secrets management"),
            ("Comprehensive PAM", "Secrets management, session recording and approval workflows"),
            ("Advanced PAM", "Zero standing privileges with just-in-time access"),
        ),
        weight=0.25,
        explanation="Privileged access management protects high-value administrative access.",
    ),
    Question(
        id="is4",
        category_id="identity-saas",
        prompt="How effectively do you detect and prevent risky SaaS and OAuth application usage in real-time?",
        options=_options(
            ("No SaaS oversight", "No visibility into unauthorized SaaS applications or OAuth grants"),
            ("Basic app inventory", "Manual discovery of some SaaS applications"),
            ("Automated discovery", "CASB with basic application visibility"),
            ("Real-time monitoring", "Active monitoring of SaaS usage with automated policy enforcement"),
            ("Intelligent intervention", "Real-time detection of risky OAuth grants with in-the-moment coaching"),
        ),
        weight=0.2,
        explanation=(
            "Proactive SaaS governance reduces security incidents by 55% "
            "(Gartner Market Guide, 2024)."
        ),
    ),

    # ── Phishing Resilience ─────────────────────────────────────────────────
    Question(
        id="pr1",
        category_id="phishing-resilience",
        prompt="What email security controls do you have in place?",
        options=_options(
            ("Basic email filtering", "Standard spam filtering only"),
            ("Enhanced filtering", "Anti-phishing and malware detection with basic threat feeds"),
            ("Advanced email security", "Sandboxing, URL rewriting and attachment analysis"),
            ("Comprehensive protection", "Advanced threat detection with documented blocked threats"),
            ("Proven threat prevention", "Measurable phishing reduction with user reporting feedback"),
        ),
        weight=0.3,
        explanation=(
            "68% of breaches involve a non-malicious human element, with phishing "
            "the leading vector (Verizon DBIR, 2024)."
        ),
    ),
    Question(
        id="pr2",
        category_id="phishing-resilience",
        prompt="How comprehensive is your phishing awareness training and testing?",
        options=_options(
            ("No phishing training", "No specific phishing awareness training"),
            ("Annual training", "Annual sessions with basic simulations"),
            ("Regular training", "Quarterly training with monthly simulated phishing tests"),
            ("Comprehensive program", "Monthly training, click rate tracking and remedial training"),
            ("Measurable risk reduction program", "Documented improvement in click and reporting rates"),
        ),
        weight=0.25,
        explanation="Human risk programs help employees recognize threats and build security culture.",
    ),
    Question(
        id="pr3",
        category_id="phishing-resilience",
        prompt="How effectively do you detect and prevent sophisticated phishing attacks in real-time?",
        options=_options(
            ("Basic email filtering", "Signature-based detection with limited phishing protection"),
            ("Enhanced email security", "Some behavioral detection and safe links"),
            ("Advanced threat detection", "Multi-layered email security with sandboxing and threat intelligence"),
            ("Real-time page analysis", "Real-time analysis of web pages to detect sophisticated phishing"),
            ("Intelligent content inspection", "Content inspection that detects phishing hosted on trusted services with in-the-moment guidance"),
        ),
        weight=0.25,
        explanation=(
            "Real-time content analysis detects 80% more sophisticated phishing "
            "attempts than signature-based approaches (Verizon DBIR, 2024)."
        ),
    ),
    Question(
        id="pr4",
        category_id="phishing-resilience",
        prompt="How do you handle and respond to social engineering incidents (phishing, smishing, vishing, etc.)?",
        options=_options(
            ("No formal process", "Ad-hoc response to social engineering reports"),
            ("Basic response", "Incident logging and user notification for phishing"),
            ("Structured response", "Defined procedures for phishing, smishing and vishing"),
            ("Comprehensive response", "Automated multi-channel response with threat intelligence"),
            ("Advanced orchestration", "Automated response across all vectors with real-time threat sharing"),
        ),
        weight=0.2,
        explanation="Effective response limits the impact of successful social engineering.",
    ),
)


# Questions whose upper tiers describe in-the-moment intervention capabilities
CAPABILITY_BONUS_RULES: dict[str, CapabilityBonus] = {
    "v2":  CapabilityBonus(marker="real-time intent intervention"),
    "pc1": CapabilityBonus(marker="real-time behavioral coaching"),
    "ie2": CapabilityBonus(marker="session reconstruction and replay"),
    "is4": CapabilityBonus(marker="in-the-moment SaaS/OAuth coaching"),
    "pr3": CapabilityBonus(marker="real-time content inspection"),
}


_BY_ID = {q.id: q for q in QUESTIONS}


def get_question(question_id: str) -> Optional[Question]:
    return _BY_ID.get(question_id)


def get_questions_by_category(category_id: str) -> list[Question]:
    """All questions for one category, in catalog order."""
    return [q for q in QUESTIONS if q.category_id == category_id]


def get_questions_grouped_by_category() -> dict[str, list[Question]]:
    grouped: dict[str, list[Question]] = {}
    for question in QUESTIONS:
        grouped.setdefault(question.category_id, []).append(question)
    return grouped
