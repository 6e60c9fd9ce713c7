# seed_data.py
from models import StartupMetrics, StartupProfile

# Pre-seeded startups so a fresh process has something to match against
SEED_STARTUPS = [
    StartupProfile(
        id="startup-1",
        name="HealthScope AI",
        email="team@healthscope.ai",
        industry="Healthcare",
        stage="Series A",
        raising=3_000_000,
        geography="Southeast Asia",
        description="AI diagnostic platform for rural clinics in emerging markets. Built by former doctors "
                    "with 50 clinics deployed across Philippines and Indonesia. Reducing diagnosis time by "
                    "70% and democratizing healthcare access.",
        website="healthscope.ai",
        metrics=StartupMetrics(arr=500_000, customers=50, growth="25% MoM"),
    ),
    StartupProfile(
        id="startup-2",
        name="SolarGrid",
        email="founders@solargrid.io",
        industry="Climate Tech",
        stage="Seed",
        raising=2_000_000,
        geography="US",
        description="Solar + battery storage for commercial buildings with proprietary AI for energy "
                    "optimization. Serving Fortune 500 clients with 3-year payback period. 15 buildings "
                    "deployed, expanding to 50 by EOY.",
        website="solargrid.io",
        metrics=StartupMetrics(arr=1_200_000, customers=10),
    ),
    StartupProfile(
        id="startup-3",
        name="PayFlow",
        email="hello@payflow.com",
        industry="Fintech",
        stage="Series B",
        raising=20_000_000,
        geography="Latin America",
        description="B2B payment infrastructure for Latin America processing $500M annually with 200+ "
                    "enterprise customers. Replacing wire transfers with instant settlements. Strong unit "
                    "economics and path to profitability.",
        website="payflow.com",
        metrics=StartupMetrics(arr=15_000_000, customers=200),
    ),
    StartupProfile(
        id="startup-4",
        name="Vibe",
        email="team@vibe.social",
        industry="Consumer",
        stage="Pre-seed",
        raising=500_000,
        geography="US",
        description="Social app for college students to discover events and meet friends. Viral referral "
                    "loops. 50K users across 5 universities with 40% weekly retention. Expanding to 20 "
                    "schools this semester.",
        website="vibe.social",
        metrics=StartupMetrics(customers=50_000, growth="40% weekly retention"),
    ),
    StartupProfile(
        id="startup-5",
        name="RoboWeld",
        email="info@roboweld.tech",
        industry="Robotics",
        stage="Seed",
        raising=4_000_000,
        geography="US",
        description="Computer vision welding robots for automotive manufacturing reducing defects by 95%. "
                    "Deployed at 2 Tier-1 suppliers with $8M in LOIs. Founded by ex-Tesla robotics team.",
        website="roboweld.tech",
        metrics=StartupMetrics(customers=2),
    ),
    StartupProfile(
        id="startup-6",
        name="MedData Pro",
        email="contact@meddata.pro",
        industry="Healthcare",
        stage="Seed",
        raising=1_500_000,
        geography="US",
        description="HIPAA-compliant patient data platform for small clinics. SaaS with strong unit "
                    "economics. 75 customers, $4K ACV, sub-5% churn, 15% MoM growth. Replacing legacy "
                    "systems costing 10x more.",
        website="meddata.pro",
        metrics=StartupMetrics(arr=300_000, customers=75, growth="15% MoM"),
    ),
    StartupProfile(
        id="startup-7",
        name="CarbonTech",
        email="hello@carbontech.io",
        industry="Climate Tech",
        stage="Series A",
        raising=5_000_000,
        geography="Europe",
        description="Direct air capture technology with partnerships across 3 countries. Proven carbon "
                    "removal at scale with offtake agreements from Microsoft and Stripe. Novel chemistry "
                    "IP with 40% cost reduction.",
        website="carbontech.io",
        metrics=StartupMetrics(customers=8),
    ),
    StartupProfile(
        id="startup-8",
        name="ShopLocal",
        email="team@shoplocal.app",
        industry="Consumer",
        stage="Seed",
        raising=800_000,
        geography="US",
        description="Marketplace connecting local artisans with conscious consumers. 30% repeat purchase "
                    "rate. 25K buyers, 500 sellers. 15% take rate with path to profitability in 18 months.",
        website="shoplocal.app",
        metrics=StartupMetrics(customers=25_000, growth="30% MoM GMV"),
    ),
]
