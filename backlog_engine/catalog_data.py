"""Static workflow template data.

Each category maps to a list of workflow templates. Follow-ups are
``(pattern, category)`` or ``(pattern, category, priority)`` tuples; a follow-up
whose category differs from its template's category is a cross-team handoff.
"""

RAW_CATALOG = {
    # Marketing
    "marketing": [
        {
            "key": "mkt_content_calendar",
            "pattern": "Draft Q{q} social media content calendar",
            "context_keys": ["q"],
            "follow_ups": [
                ("Review Q{q} content calendar with stakeholders", "marketing"),
                ("Get design assets for Q{q} social posts", "marketing"),
                ("Schedule Q{q} social media posts", "marketing"),
                ("Set up analytics tracking for Q{q} social campaigns", "marketing"),
            ],
        },
        {
            "key": "mkt_campaign_roi",
            "pattern": "Analyze campaign ROI for {channel}",
            "context_keys": ["channel"],
            "follow_ups": [
                ("Present {channel} ROI findings to leadership", "marketing"),
                ("Optimize {channel} ad spend based on ROI data", "marketing"),
                ("Create follow-up campaign for {channel}", "marketing"),
                ("Update {channel} budget allocation", "finance", "medium"),
            ],
        },
        {
            "key": "mkt_ab_test",
            "pattern": "Create A/B test for landing page {variant}",
            "context_keys": ["variant"],
            "follow_ups": [
                ("Monitor A/B test results for variant {variant}", "marketing"),
                ("Analyze conversion data for variant {variant}", "marketing"),
                ("Implement winning variant from {variant} test", "engineering"),
                ("Document A/B test learnings — variant {variant}", "marketing"),
            ],
        },
        {
            "key": "mkt_blog",
            "pattern": "Write blog post about {topic}",
            "context_keys": ["topic"],
            "follow_ups": [
                ("Edit and proofread {topic} blog post", "marketing"),
                ("Create social media snippets for {topic} article", "marketing"),
                ("Design featured image for {topic} blog post", "marketing"),
                ("Distribute {topic} blog post to newsletter subscribers", "marketing"),
                ("Track engagement metrics for {topic} blog post", "marketing"),
            ],
        },
        {
            "key": "mkt_webinar",
            "pattern": "Plan webinar on {topic}",
            "context_keys": ["topic"],
            "follow_ups": [
                ("Create slide deck for {topic} webinar", "marketing"),
                ("Send invite emails for {topic} webinar", "marketing"),
                ("Set up registration page for {topic} webinar", "marketing"),
                ("Rehearse {topic} webinar presentation", "marketing"),
                ("Prepare follow-up sequence for {topic} webinar attendees", "sales"),
            ],
        },
        {
            "key": "mkt_ad_creative",
            "pattern": "Design ad creative for {channel} campaign",
            "context_keys": ["channel"],
            "follow_ups": [
                ("Get approval on {channel} ad creative", "marketing"),
                ("Launch {channel} ad campaign", "marketing"),
                ("Set up conversion tracking for {channel} ads", "marketing"),
                ("Monitor first 48h performance of {channel} ads", "marketing"),
            ],
        },
        {
            "key": "mkt_seo_audit",
            "pattern": "Audit SEO performance for top pages",
            "context_keys": [],
            "follow_ups": [
                ("Fix critical SEO issues from audit", "engineering"),
                ("Update meta descriptions for underperforming pages", "marketing"),
                ("Build backlink outreach list from SEO audit", "marketing"),
                ("Create content brief for SEO gap opportunities", "marketing"),
            ],
        },
        {
            "key": "mkt_influencer",
            "pattern": "Schedule influencer outreach for {channel}",
            "context_keys": ["channel"],
            "follow_ups": [
                ("Negotiate rates with {channel} influencers", "marketing"),
                ("Brief influencers on {channel} campaign goals", "marketing"),
                ("Review influencer content drafts for {channel}", "marketing"),
                ("Measure influencer campaign impact on {channel}", "marketing"),
            ],
        },
        {
            "key": "mkt_press_release",
            "pattern": "Prepare press release for product launch",
            "context_keys": [],
            "follow_ups": [
                ("Get legal review on press release", "operations"),
                ("Distribute press release to media contacts", "marketing"),
                ("Monitor press coverage and media mentions", "marketing"),
                ("Compile media coverage report for leadership", "marketing"),
            ],
        },
        {
            "key": "mkt_competitor",
            "pattern": "Review competitor positioning report",
            "context_keys": [],
            "follow_ups": [
                ("Update competitive battle cards with new findings", "sales"),
                ("Identify messaging gaps from competitor analysis", "marketing"),
                ("Brief sales team on competitor positioning changes", "sales"),
                ("Adjust product positioning based on competitor moves", "product"),
            ],
        },
    ],

    # Sales
    "sales": [
        {
            "key": "sales_follow_up",
            "pattern": "Follow up with {company} lead",
            "context_keys": ["company"],
            "follow_ups": [
                ("Schedule discovery call with {company}", "sales"),
                ("Send case studies to {company} stakeholders", "sales"),
                ("Research {company} org structure for champion mapping", "sales"),
                ("Add {company} notes to CRM", "sales"),
            ],
        },
        {
            "key": "sales_proposal",
            "pattern": "Prepare proposal for {company}",
            "context_keys": ["company"],
            "follow_ups": [
                ("Send proposal to {company} decision makers", "sales"),
                ("Schedule proposal walkthrough with {company}", "sales"),
                ("Prepare pricing alternatives for {company}", "sales"),
                ("Get legal review on {company} contract terms", "operations"),
            ],
        },
        {
            "key": "sales_demo",
            "pattern": "Conduct demo for {company}",
            "context_keys": ["company"],
            "follow_ups": [
                ("Send demo recording and recap to {company}", "sales"),
                ("Address {company} technical questions from demo", "engineering"),
                ("Prepare custom ROI analysis for {company}", "sales"),
                ("Schedule follow-up meeting with {company}", "sales"),
            ],
        },
        {
            "key": "sales_negotiate",
            "pattern": "Negotiate contract terms with {company}",
            "context_keys": ["company"],
            "follow_ups": [
                ("Get legal approval on {company} contract", "operations"),
                ("Process signed contract for {company}", "sales", "high"),
                ("Generate initial invoice for {company}", "finance"),
                ("Schedule {company} onboarding kickoff", "support"),
                ("Notify product team about {company} requirements", "product"),
            ],
        },
        {
            "key": "sales_pipeline",
            "pattern": "Update CRM pipeline for Q{q}",
            "context_keys": ["q"],
            "follow_ups": [
                ("Verify Q{q} pipeline accuracy with reps", "sales"),
                ("Identify at-risk deals in Q{q} pipeline", "sales"),
                ("Present Q{q} pipeline review to leadership", "sales"),
                ("Update Q{q} revenue forecast based on pipeline", "finance"),
            ],
        },
        {
            "key": "sales_outreach",
            "pattern": "Cold outreach batch — {num2} prospects",
            "context_keys": ["num2"],
            "follow_ups": [
                ("Follow up on non-responders from {num2}-prospect batch", "sales"),
                ("Qualify responses from {num2}-prospect outreach", "sales"),
                ("A/B test subject lines for next outreach batch", "sales"),
                ("Update prospect list for next outreach batch", "sales"),
            ],
        },
        {
            "key": "sales_churn",
            "pattern": "Analyze churn reasons for Q{q}",
            "context_keys": ["q"],
            "follow_ups": [
                ("Present Q{q} churn analysis to product team", "product"),
                ("Create win-back campaign for Q{q} churned accounts", "marketing"),
                ("Implement retention improvements based on Q{q} churn data", "product"),
                ("Update Q{q} churn report for board", "finance"),
            ],
        },
        {
            "key": "sales_qbr",
            "pattern": "Schedule quarterly business review with {company}",
            "context_keys": ["company"],
            "follow_ups": [
                ("Prepare QBR deck for {company}", "sales"),
                ("Pull usage analytics for {company} QBR", "product"),
                ("Conduct QBR meeting with {company}", "sales"),
                ("Document action items from {company} QBR", "sales"),
                ("Identify upsell opportunities from {company} QBR", "sales"),
            ],
        },
        {
            "key": "sales_upsell",
            "pattern": "Create upsell playbook for {product}",
            "context_keys": ["product"],
            "follow_ups": [
                ("Train sales team on {product} upsell playbook", "sales"),
                ("Create objection handling guide for {product} upsell", "sales"),
                ("Build {product} upsell email sequence", "marketing"),
                ("Track {product} upsell conversion rates", "sales"),
            ],
        },
    ],

    # Operations
    "operations": [
        {
            "key": "ops_vendor_audit",
            "pattern": "Audit vendor contract with {vendor}",
            "context_keys": ["vendor"],
            "follow_ups": [
                ("Negotiate renewal terms with {vendor}", "operations"),
                ("Evaluate {vendor} alternatives", "operations"),
                ("Update {vendor} SLA documentation", "operations"),
                ("Review {vendor} spending with finance", "finance"),
            ],
        },
        {
            "key": "ops_sop",
            "pattern": "Review and update SOP documentation",
            "context_keys": [],
            "follow_ups": [
                ("Distribute updated SOPs to department leads", "operations"),
                ("Schedule SOP training sessions", "hr"),
                ("Set up quarterly SOP review cycle", "operations"),
                ("Audit compliance with updated SOPs", "operations"),
            ],
        },
        {
            "key": "ops_tooling",
            "pattern": "Evaluate new tooling for {process}",
            "context_keys": ["process"],
            "follow_ups": [
                ("Run pilot program for new {process} tool", "operations"),
                ("Collect team feedback on {process} tool trial", "operations"),
                ("Prepare cost-benefit analysis for {process} tool", "finance"),
                ("Plan migration to new {process} tool", "operations"),
                ("Train team on new {process} tool", "hr"),
            ],
        },
        {
            "key": "ops_vendor_renewal",
            "pattern": "Negotiate vendor renewal for {vendor}",
            "context_keys": ["vendor"],
            "follow_ups": [
                ("Finalize {vendor} renewal paperwork", "operations"),
                ("Update {vendor} contract in records", "operations"),
                ("Review {vendor} renewal impact on budget", "finance"),
                ("Communicate {vendor} changes to affected teams", "operations"),
            ],
        },
        {
            "key": "ops_disaster_recovery",
            "pattern": "Update disaster recovery plan",
            "context_keys": [],
            "follow_ups": [
                ("Schedule disaster recovery drill", "operations"),
                ("Review backup systems and failover procedures", "engineering"),
                ("Train team leads on disaster recovery protocols", "hr"),
                ("Document lessons learned from DR drill", "operations"),
            ],
        },
        {
            "key": "ops_efficiency",
            "pattern": "Conduct process efficiency analysis for {process}",
            "context_keys": ["process"],
            "follow_ups": [
                ("Implement efficiency improvements for {process}", "operations"),
                ("Measure impact of {process} optimizations", "operations"),
                ("Document new {process} workflow", "operations"),
                ("Train team on optimized {process} workflow", "hr"),
            ],
        },
        {
            "key": "ops_compliance",
            "pattern": "Review compliance requirements update",
            "context_keys": [],
            "follow_ups": [
                ("Update policies to meet new compliance standards", "operations"),
                ("Schedule compliance training for all employees", "hr"),
                ("Audit current systems for compliance gaps", "engineering"),
                ("Report compliance status to leadership", "operations"),
            ],
        },
    ],

    # HR
    "hr": [
        {
            "key": "hr_screen",
            "pattern": "Screen candidates for {role} position",
            "context_keys": ["role"],
            "follow_ups": [
                ("Schedule first-round interviews for {role}", "hr"),
                ("Prepare interview scorecard for {role} candidates", "hr"),
                ("Coordinate technical assessment for {role} candidates", "hr"),
                ("Send rejection emails for unqualified {role} candidates", "hr"),
            ],
        },
        {
            "key": "hr_interview",
            "pattern": "Schedule interviews — {role} role",
            "context_keys": ["role"],
            "follow_ups": [
                ("Conduct interviews for {role} position", "hr"),
                ("Collect interviewer feedback for {role} candidates", "hr"),
                ("Schedule final-round interviews for {role}", "hr"),
                ("Prepare {role} offer package", "hr", "high"),
            ],
        },
        {
            "key": "hr_job_desc",
            "pattern": "Draft job description for {role}",
            "context_keys": ["role"],
            "follow_ups": [
                ("Get hiring manager approval on {role} job description", "hr"),
                ("Post {role} job to job boards", "hr"),
                ("Share {role} opening on social channels", "marketing"),
                ("Set up applicant tracking for {role}", "hr"),
            ],
        },
        {
            "key": "hr_team_building",
            "pattern": "Plan team-building event for Q{q}",
            "context_keys": ["q"],
            "follow_ups": [
                ("Book venue for Q{q} team-building event", "hr"),
                ("Send invitations for Q{q} team event", "hr"),
                ("Coordinate catering for Q{q} team event", "operations"),
                ("Collect feedback from Q{q} team-building event", "hr"),
            ],
        },
        {
            "key": "hr_perf_review",
            "pattern": "Conduct performance review cycle prep",
            "context_keys": [],
            "follow_ups": [
                ("Distribute self-evaluation forms", "hr"),
                ("Train managers on review process", "hr"),
                ("Compile performance data for reviews", "hr"),
                ("Schedule 1-on-1 review meetings", "hr"),
                ("Prepare compensation adjustment recommendations", "finance"),
            ],
        },
        {
            "key": "hr_orientation",
            "pattern": "Coordinate new hire orientation",
            "context_keys": [],
            "follow_ups": [
                ("Set up new hire workstations and accounts", "operations"),
                ("Schedule new hire meet-and-greets", "hr"),
                ("Assign onboarding buddy to new hires", "hr"),
                ("Check in with new hires after first week", "hr"),
                ("Collect 30-day new hire feedback", "hr"),
            ],
        },
        {
            "key": "hr_compensation",
            "pattern": "Review compensation benchmarking data",
            "context_keys": [],
            "follow_ups": [
                ("Identify roles below market compensation", "hr"),
                ("Prepare compensation adjustment proposal", "hr"),
                ("Review compensation budget impact", "finance"),
                ("Present compensation recommendations to leadership", "hr"),
            ],
        },
    ],

    # Finance
    "finance": [
        {
            "key": "fin_reconcile",
            "pattern": "Reconcile accounts for {month}",
            "context_keys": ["month"],
            "follow_ups": [
                ("Investigate discrepancies from {month} reconciliation", "finance"),
                ("Prepare {month} financial close report", "finance"),
                ("Update {month} variance analysis", "finance"),
                ("File {month} reconciliation documentation", "finance"),
            ],
        },
        {
            "key": "fin_pnl",
            "pattern": "Prepare monthly P&L statement",
            "context_keys": [],
            "follow_ups": [
                ("Review P&L anomalies with department heads", "finance"),
                ("Present P&L to executive team", "finance"),
                ("Update annual forecast with P&L actuals", "finance"),
                ("Identify cost-saving opportunities from P&L", "operations"),
            ],
        },
        {
            "key": "fin_expenses",
            "pattern": "Review expense reports — batch #{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Flag policy violations in expense batch #{num}", "finance"),
                ("Process approved expenses from batch #{num}", "finance"),
                ("Update expense policy based on batch #{num} trends", "operations"),
                ("Send reimbursements for batch #{num}", "finance"),
            ],
        },
        {
            "key": "fin_forecast",
            "pattern": "Update financial forecast model",
            "context_keys": [],
            "follow_ups": [
                ("Validate forecast assumptions with sales leadership", "sales"),
                ("Present updated forecast to board", "finance"),
                ("Align departmental budgets to new forecast", "finance"),
                ("Create scenario analysis from forecast model", "finance"),
            ],
        },
        {
            "key": "fin_budget_audit",
            "pattern": "Audit departmental budgets for Q{q}",
            "context_keys": ["q"],
            "follow_ups": [
                ("Discuss Q{q} budget overruns with department leads", "finance"),
                ("Propose Q{q} budget reallocations", "finance"),
                ("Update Q{q} budget tracking dashboard", "finance"),
                ("Present Q{q} budget review to leadership", "finance"),
            ],
        },
        {
            "key": "fin_investor",
            "pattern": "Prepare quarterly investor report",
            "context_keys": [],
            "follow_ups": [
                ("Get executive sign-off on investor report", "finance"),
                ("Distribute investor report to stakeholders", "finance"),
                ("Schedule investor Q&A follow-ups", "finance"),
                ("Update investor relations dashboard", "finance"),
            ],
        },
        {
            "key": "fin_cash_flow",
            "pattern": "Analyze cash flow projections",
            "context_keys": [],
            "follow_ups": [
                ("Identify cash flow risks and mitigation plans", "finance"),
                ("Optimize payment terms with key vendors", "operations"),
                ("Review accounts receivable aging report", "finance"),
                ("Present cash flow outlook to leadership", "finance"),
            ],
        },
    ],

    # Product
    "product": [
        {
            "key": "prod_prd",
            "pattern": "Write PRD for {feature} feature",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Review PRD for {feature} with engineering", "engineering"),
                ("Get stakeholder sign-off on {feature} PRD", "product"),
                ("Create design mockups for {feature}", "product"),
                ("Break down {feature} PRD into engineering tickets", "engineering"),
                ("Define success metrics for {feature}", "product"),
            ],
        },
        {
            "key": "prod_backlog",
            "pattern": "Prioritize backlog for sprint #{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Run sprint #{num} planning meeting", "product"),
                ("Write acceptance criteria for sprint #{num} stories", "product"),
                ("Coordinate sprint #{num} dependencies across teams", "product"),
                ("Set up sprint #{num} tracking board", "product"),
            ],
        },
        {
            "key": "prod_research",
            "pattern": "Conduct user research session #{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Synthesize findings from research session #{num}", "product"),
                ("Create user journey map from session #{num} insights", "product"),
                ("Share research session #{num} findings with team", "product"),
                ("Identify feature opportunities from research #{num}", "product"),
            ],
        },
        {
            "key": "prod_wireframes",
            "pattern": "Create wireframes for {feature}",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Run usability test on {feature} wireframes", "product"),
                ("Iterate {feature} wireframes based on feedback", "product"),
                ("Create high-fidelity designs for {feature}", "product"),
                ("Hand off {feature} designs to engineering", "engineering"),
            ],
        },
        {
            "key": "prod_roadmap",
            "pattern": "Review and update product roadmap",
            "context_keys": [],
            "follow_ups": [
                ("Communicate roadmap changes to stakeholders", "product"),
                ("Align engineering capacity with updated roadmap", "engineering"),
                ("Update marketing plans for roadmap changes", "marketing"),
                ("Create customer-facing roadmap summary", "product"),
            ],
        },
        {
            "key": "prod_launch",
            "pattern": "Plan product launch checklist for v{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Create v{num} launch marketing materials", "marketing"),
                ("Prepare v{num} release notes", "product"),
                ("Train support team on v{num} changes", "support"),
                ("Coordinate v{num} launch day activities", "operations"),
                ("Monitor v{num} launch metrics", "product"),
            ],
        },
        {
            "key": "prod_feature_requests",
            "pattern": "Triage customer feature requests — batch #{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Group feature requests #{num} by theme", "product"),
                ("Score and rank feature requests from batch #{num}", "product"),
                ("Respond to top-voted requests from batch #{num}", "support"),
                ("Add high-impact requests #{num} to roadmap", "product"),
            ],
        },
        {
            "key": "prod_metrics",
            "pattern": "Analyze feature usage metrics for {feature}",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Identify drop-off points in {feature} flow", "product"),
                ("Propose {feature} UX improvements based on data", "product"),
                ("Set up enhanced tracking for {feature}", "engineering"),
                ("Report {feature} adoption metrics to stakeholders", "product"),
            ],
        },
    ],

    # Engineering
    "engineering": [
        {
            "key": "eng_bug",
            "pattern": "Fix bug #{num} in {module} module",
            "context_keys": ["num", "module"],
            "follow_ups": [
                ("Write regression test for bug #{num} in {module}", "engineering"),
                ("Code review bug #{num} fix for {module}", "engineering"),
                ("Deploy bug #{num} fix to staging", "engineering"),
                ("Verify bug #{num} fix in production for {module}", "engineering"),
                ("Update {module} documentation after bug #{num} fix", "engineering"),
            ],
        },
        {
            "key": "eng_code_review",
            "pattern": "Code review PR #{num} for {module}",
            "context_keys": ["num", "module"],
            "follow_ups": [
                ("Address review comments on PR #{num} for {module}", "engineering"),
                ("Run integration tests for PR #{num}", "engineering"),
                ("Merge and deploy PR #{num} for {module}", "engineering"),
                ("Monitor {module} metrics after PR #{num} deploy", "engineering"),
            ],
        },
        {
            "key": "eng_refactor",
            "pattern": "Refactor {module} module",
            "context_keys": ["module"],
            "follow_ups": [
                ("Update unit tests for refactored {module}", "engineering"),
                ("Update API docs after {module} refactor", "engineering"),
                ("Performance test refactored {module}", "engineering"),
                ("Migrate dependent services to new {module} API", "engineering"),
            ],
        },
        {
            "key": "eng_tests",
            "pattern": "Write unit tests for {module}",
            "context_keys": ["module"],
            "follow_ups": [
                ("Achieve 90% code coverage for {module}", "engineering"),
                ("Add integration tests for {module}", "engineering"),
                ("Set up CI test pipeline for {module}", "engineering"),
                ("Document {module} testing patterns", "engineering"),
            ],
        },
        {
            "key": "eng_deploy",
            "pattern": "Deploy hotfix to {env} environment",
            "context_keys": ["env"],
            "follow_ups": [
                ("Monitor {env} health after hotfix deploy", "engineering"),
                ("Verify {env} hotfix with QA", "engineering"),
                ("Write post-mortem for {env} hotfix", "engineering"),
                ("Update runbook with {env} deploy learnings", "operations"),
            ],
        },
        {
            "key": "eng_migrate",
            "pattern": "Migrate {service} to new architecture",
            "context_keys": ["service"],
            "follow_ups": [
                ("Run load tests on migrated {service}", "engineering"),
                ("Update monitoring dashboards for {service}", "engineering"),
                ("Deprecate legacy {service} endpoints", "engineering"),
                ("Train team on new {service} architecture", "engineering"),
                ("Update {service} documentation", "engineering"),
            ],
        },
        {
            "key": "eng_security",
            "pattern": "Conduct security audit for {module}",
            "context_keys": ["module"],
            "follow_ups": [
                ("Fix vulnerabilities found in {module} audit", "engineering", "critical"),
                ("Update security policies for {module}", "operations"),
                ("Schedule penetration test for {module}", "engineering"),
                ("Document {module} security improvements", "engineering"),
            ],
        },
        {
            "key": "eng_design_doc",
            "pattern": "Write technical design doc for {feature}",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Review {feature} design doc with team", "engineering"),
                ("Create implementation plan for {feature}", "engineering"),
                ("Estimate engineering effort for {feature}", "engineering"),
                ("Set up {feature} project board and milestones", "product"),
            ],
        },
        {
            "key": "eng_perf",
            "pattern": "Investigate performance bottleneck in {service}",
            "context_keys": ["service"],
            "follow_ups": [
                ("Implement fix for {service} performance issue", "engineering"),
                ("Add performance benchmarks for {service}", "engineering"),
                ("Set up alerting for {service} latency", "engineering"),
                ("Document {service} performance optimization", "engineering"),
            ],
        },
    ],

    # Support
    "support": [
        {
            "key": "sup_escalation",
            "pattern": "Resolve escalated ticket #{num} for {company}",
            "context_keys": ["num", "company"],
            "follow_ups": [
                ("Send resolution summary to {company} for ticket #{num}", "support"),
                ("Create knowledge base article from ticket #{num}", "support"),
                ("File bug report from {company} ticket #{num}", "engineering"),
                ("Follow up with {company} on ticket #{num} satisfaction", "support"),
            ],
        },
        {
            "key": "sup_kb_article",
            "pattern": "Update knowledge base article for {feature}",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Review {feature} KB article with product team", "product"),
                ("Add screenshots to {feature} KB article", "support"),
                ("Translate {feature} KB article for localization", "support"),
                ("Link {feature} KB article in app help center", "engineering"),
            ],
        },
        {
            "key": "sup_trends",
            "pattern": "Analyze support ticket trends for {month}",
            "context_keys": ["month"],
            "follow_ups": [
                ("Present {month} support trends to product team", "product"),
                ("Identify top {month} issues for engineering backlog", "engineering"),
                ("Create {month} customer satisfaction report", "support"),
                ("Propose process improvements from {month} trends", "operations"),
            ],
        },
        {
            "key": "sup_training",
            "pattern": "Train new support agent — module #{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Quiz new agent on module #{num} material", "support"),
                ("Shadow session for agent on module #{num} topics", "support"),
                ("Evaluate agent competency after module #{num}", "support"),
                ("Advance agent to module #{num} next level", "support"),
            ],
        },
        {
            "key": "sup_troubleshooting",
            "pattern": "Create troubleshooting guide for {feature}",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Test {feature} troubleshooting steps with real cases", "support"),
                ("Add {feature} troubleshooting guide to chatbot", "engineering"),
                ("Train support team on {feature} troubleshooting", "support"),
                ("Collect feedback on {feature} troubleshooting guide", "support"),
            ],
        },
        {
            "key": "sup_faq",
            "pattern": "Build FAQ for {feature} launch",
            "context_keys": ["feature"],
            "follow_ups": [
                ("Publish {feature} FAQ to help center", "support"),
                ("Brief support team on {feature} FAQ", "support"),
                ("Monitor {feature} questions not covered by FAQ", "support"),
                ("Update {feature} FAQ based on launch feedback", "support"),
            ],
        },
        {
            "key": "sup_triage",
            "pattern": "Triage incoming tickets — batch #{num}",
            "context_keys": ["num"],
            "follow_ups": [
                ("Assign priority tickets from batch #{num}", "support"),
                ("Escalate critical issues from batch #{num}", "support", "high"),
                ("Send auto-responses for batch #{num} common issues", "support"),
                ("Report batch #{num} volume to leadership", "support"),
            ],
        },
        {
            "key": "sup_eng_coord",
            "pattern": "Coordinate with engineering on bug #{num} from {company}",
            "context_keys": ["num", "company"],
            "follow_ups": [
                ("Get ETA from engineering on bug #{num}", "engineering"),
                ("Update {company} on bug #{num} progress", "support"),
                ("Verify bug #{num} fix resolves {company} issue", "support"),
                ("Close {company} ticket for bug #{num}", "support"),
            ],
        },
    ],
}
