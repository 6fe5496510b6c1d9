from teamscard import CardSection


def test_section_setters_keep_last_value_per_key():
    s = CardSection()
    out = (
        s.title("first")
        .activity_title("Deploy")
        .activity_subtitle("prod-eu")
        .activity_image("https://img.example/a.png")
        .activity_text("rolling out")
        .text("body 1")
        .title("second")
        .text("body 2")
    )
    assert out is s
    assert s.dump() == {
        "title": "second",
        "activityTitle": "Deploy",
        "activitySubtitle": "prod-eu",
        "activityImage": "https://img.example/a.png",
        "activityText": "rolling out",
        "text": "body 2",
    }


def test_facts_and_images_accumulate_in_call_order():
    s = CardSection()
    s.add_fact("Host", "web-01").add_fact("Status", "down").add_fact("Host", "web-02")
    s.add_image("https://img.example/1.png").add_image("https://img.example/2.png", title="graph")

    d = s.dump()
    assert d["facts"] == [
        {"name": "Host", "value": "web-01"},
        {"name": "Status", "value": "down"},
        {"name": "Host", "value": "web-02"},
    ]
    assert d["images"] == [
        {"image": "https://img.example/1.png"},
        {"image": "https://img.example/2.png", "title": "graph"},
    ]


def test_section_link_button_overwrites_previous():
    s = CardSection().link_button("Old", "https://a.example").link_button("Runbook", "https://b.example")
    actions = s.dump()["potentialAction"]
    assert actions == [
        {
            "@context": "http://schema.org",
            "@type": "ViewAction",
            "name": "Runbook",
            "target": ["https://b.example"],
        }
    ]


def test_markdown_toggle():
    s = CardSection()
    assert "markdown" not in s.dump()
    s.disable_markdown()
    assert s.dump()["markdown"] is False
    s.enable_markdown()
    assert s.dump()["markdown"] is True


def test_empty_section_dumps_empty_mapping():
    assert CardSection().dump() == {}
